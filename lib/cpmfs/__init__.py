"""Drives, file control blocks and 8.3 names."""
from .base import BaseDrive, FileControlBlock, split_drive, to_8_3
from .drives import DriveTable
from .errors import InvalidDrive, NotFound, OperationFailure, ReadOnly
from .interfaces import DRIVE_TYPES
from .local import LocalDrive
from .memory import MemoryDrive
