"""This module maps drive letters to drives."""
import logging

from ...system.shcommon import DRIVE_LETTERS
from .base import BaseDrive, split_drive
from .errors import InvalidDrive, NotFound


class DriveTable(object):
	"""
	this class keeps track of the drives and the default drive.
	Filenames passed to it may carry a drive prefix ('B:FOO.TXT');
	without one the default drive is used.
	"""
	def __init__(self, default="A", logger=None):
		self.letter2drive = {}
		self.logger = logger or logging.getLogger("cpmrm.cpmfs")
		self.set_default(default)

	def set_default(self, letter):
		"""sets the default drive."""
		letter = letter.upper().rstrip(":")
		if len(letter) != 1 or letter not in DRIVE_LETTERS:
			raise InvalidDrive("Invalid drive: {d}".format(d=letter))
		self.default = letter

	def mount(self, letter, drive):
		"""mounts drive as letter, replacing a previously mounted drive."""
		letter = letter.upper().rstrip(":")
		if len(letter) != 1 or letter not in DRIVE_LETTERS:
			raise InvalidDrive("Invalid drive: {d}".format(d=letter))
		if not isinstance(drive, BaseDrive):
			raise TypeError("expected a BaseDrive, got {t}".format(t=type(drive).__name__))
		self.letter2drive[letter] = drive
		self.logger.debug("mounted {d} as {l}:".format(d=drive.repr(), l=letter))

	def get_drive(self, number=0):
		"""
		returns the drive for a drive number (0 is the default drive,
		1 is A: and so on).
		"""
		if number == 0:
			letter = self.default
		else:
			letter = DRIVE_LETTERS[number - 1]
		try:
			return self.letter2drive[letter]
		except KeyError:
			raise InvalidDrive("Not mounted: {d}:".format(d=letter))

	def resolve(self, filename):
		"""returns a tuple of (number, drive, name) for filename."""
		number, name = split_drive(filename)
		if not name:
			raise NotFound("Missing filename")
		return number, self.get_drive(number), name

	def open(self, filename):
		number, drive, name = self.resolve(filename)
		fcb = drive.open(name)
		fcb.drive = number
		return fcb

	def close(self, fcb):
		self.get_drive(fcb.drive).close(fcb)

	def set_attributes(self, fcb):
		self.get_drive(fcb.drive).set_attributes(fcb)

	def delete(self, filename):
		number, drive, name = self.resolve(filename)
		return drive.delete(name)

	def exists(self, filename):
		try:
			number, drive, name = self.resolve(filename)
		except NotFound:
			return False
		return drive.exists(name)

	def create(self, filename, data=b"", read_only=False, system=False):
		number, drive, name = self.resolve(filename)
		return drive.create(name, data, read_only=read_only, system=system)

	def listdir(self, letter=None):
		"""lists the drive mounted as letter, or the default drive."""
		if letter is None:
			return self.get_drive(0).listdir()
		number, _ = split_drive(letter.rstrip(":") + ":")
		return self.get_drive(number).listdir()
