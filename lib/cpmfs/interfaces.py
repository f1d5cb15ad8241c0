"""
This module contains a dictionary mapping the identifiers to the drive classes
"""
from .local import LocalDrive
from .memory import MemoryDrive

# map type -> drive class
DRIVE_TYPES = {
	"local": LocalDrive,
	"Local": LocalDrive,
	"memory": MemoryDrive,
	"Memory": MemoryDrive,
	"mem": MemoryDrive,
}
