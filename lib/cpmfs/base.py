"""helper functions and base classes."""
import logging

from ...system.shcommon import DRIVE_LETTERS
from .errors import InvalidDrive, NotFound, OperationFailure

# size of a file control block in bytes
FCB_SIZE = 36

# high bit of an extension byte carries an attribute
ATTRIBUTE_BIT = 0x80

# characters allowed in a name besides letters and digits
_VALID_CHARS = "$#@!%'`(){}~^-_"


def _clean(s):
	"""removes all characters which are not valid in a name."""
	return "".join(c for c in s if (c.isascii() and c.isalnum()) or c in _VALID_CHARS)


def to_8_3(filename):
	"""
	Convert filename to the upper case 8.3 format.
	The name is truncated to 8 chars, the extension to 3 chars and
	invalid characters are removed. An empty name becomes '_'.
	:param filename: filename to convert
	:type filename: str
	:return: the converted filename
	:rtype: str
	"""
	upper = filename.upper()
	if "." in upper:
		name, ext = upper.rsplit(".", 1)
	else:
		name, ext = upper, ""
	name = _clean(name)[:8] or "_"
	ext = _clean(ext)[:3]
	if ext:
		return "{n}.{e}".format(n=name, e=ext)
	return name


def split_drive(filename):
	"""
	Split an optional drive prefix from filename.
	Returns a tuple of (drive, name) where drive is 0 for the default
	drive, 1 for A: and so on.
	Raises InvalidDrive if the prefix names a drive outside A: to P:.
	"""
	if len(filename) >= 2 and filename[1] == ":":
		letter = filename[0].upper()
		if letter not in DRIVE_LETTERS:
			raise InvalidDrive("Invalid drive: {d}:".format(d=filename[0]))
		return DRIVE_LETTERS.index(letter) + 1, filename[2:]
	return 0, filename


class FileControlBlock(object):
	"""
	The per-file descriptor used by the drives.

	The R/O and SYS attributes are kept as flags; to_bytes() and
	from_bytes() convert from and to the 36 byte memory image where they
	live in the high bits of the first two extension bytes.
	"""

	def __init__(self, drive=0, name="", ext="", read_only=False, system=False):
		self.drive = drive
		self.name = name.upper()
		self.ext = ext.upper()
		self._read_only = read_only
		self._system = system
		# host side reference kept by the drive that opened the file
		self.handle = None

	@classmethod
	def from_name(cls, filename):
		"""creates a FCB for filename, which may have a drive prefix."""
		drive, rest = split_drive(filename)
		if not rest:
			raise NotFound("Missing filename")
		converted = to_8_3(rest)
		if "." in converted:
			name, ext = converted.split(".", 1)
		else:
			name, ext = converted, ""
		return cls(drive=drive, name=name, ext=ext)

	@classmethod
	def from_bytes(cls, data):
		"""parses a FCB memory image."""
		if len(data) < FCB_SIZE:
			raise OperationFailure(
				"FCB too short: {n} bytes".format(n=len(data))
				)
		name = "".join(chr(b & 0x7F) for b in data[1:9]).rstrip(" ")
		ext = "".join(chr(b & 0x7F) for b in data[9:12]).rstrip(" ")
		return cls(
			drive=data[0],
			name=name,
			ext=ext,
			read_only=bool(data[9] & ATTRIBUTE_BIT),
			system=bool(data[10] & ATTRIBUTE_BIT),
			)

	def to_bytes(self):
		"""returns the FCB memory image as a bytearray."""
		data = bytearray(FCB_SIZE)
		data[0] = self.drive
		data[1:9] = self.name.ljust(8)[:8].encode("ascii")
		data[9:12] = self.ext.ljust(3)[:3].encode("ascii")
		if self._read_only:
			data[9] |= ATTRIBUTE_BIT
		if self._system:
			data[10] |= ATTRIBUTE_BIT
		return data

	@property
	def filename(self):
		"""the name and extension, joined by a dot."""
		if self.ext:
			return "{n}.{e}".format(n=self.name, e=self.ext)
		return self.name

	def is_read_only(self):
		return self._read_only

	def set_read_only(self, flag):
		self._read_only = bool(flag)

	def is_system(self):
		return self._system

	def set_system(self, flag):
		self._system = bool(flag)

	def __repr__(self):
		return "FileControlBlock(drive={d}, filename={f!r}, read_only={r}, system={s})".format(
			d=self.drive, f=self.filename, r=self._read_only, s=self._system,
			)


class BaseDrive(object):
	"""
Baseclass for all drives.
Other drives should subclass this.
All names passed to a drive are converted to the 8.3 format first.
"""
	def __init__(self, logger=None):
		"""
		"logger" should be a logging.Logger or None for the default one.
		"""
		self.logger = logger or logging.getLogger("cpmrm.cpmfs")

	def repr(self):
		"""
this should return a string identifying the instance of this drive.
"""
		return "Unknown Drive"

	def listdir(self):
		"""this should return a sorted list of all 8.3 names on the drive."""
		return []

	def exists(self, name):
		"""this should return whether name exists on the drive."""
		return to_8_3(name) in self.listdir()

	def open(self, name):
		"""
		this should return a FileControlBlock carrying the attributes of name.
		raise NotFound if name does not exist.
		"""
		raise OperationFailure("NotImplemented")

	def close(self, fcb):
		"""this should release whatever open() acquired for fcb."""
		pass

	def set_attributes(self, fcb):
		"""this should persist the R/O and SYS attributes of fcb."""
		raise OperationFailure("NotImplemented")

	def delete(self, name):
		"""
		this should delete name and return True, or False if name did not exist.
		raise ReadOnly if the R/O attribute of name is set.
		"""
		raise OperationFailure("NotImplemented")

	def create(self, name, data=b"", read_only=False, system=False):
		"""this should create (or replace) name with the given content and attributes."""
		raise OperationFailure("NotImplemented")

	def log(self, msg):
		"""logs a debug message to self.logger."""
		self.logger.debug(msg)
