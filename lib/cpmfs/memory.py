"""A drive kept in memory, used for tests and headless runs."""
from .base import BaseDrive, FileControlBlock, to_8_3
from .errors import NotFound, ReadOnly


class _Entry(object):
	"""content and attributes of a file on a MemoryDrive."""
	def __init__(self, data=b"", read_only=False, system=False):
		self.data = bytes(data)
		self.read_only = read_only
		self.system = system


class MemoryDrive(BaseDrive):
	"""A drive whose files only exist in memory."""
	def __init__(self, files=None, logger=None):
		BaseDrive.__init__(self, logger)
		self.files = {}
		for name, data in (files or {}).items():
			self.create(name, data)

	def repr(self):
		return "Memory Drive [{n} files]".format(n=len(self.files))

	def _get(self, name):
		key = to_8_3(name)
		if key not in self.files:
			raise NotFound("Not found: {n}".format(n=key))
		return key, self.files[key]

	def listdir(self):
		return sorted(self.files)

	def exists(self, name):
		return to_8_3(name) in self.files

	def open(self, name):
		key, entry = self._get(name)
		fcb = FileControlBlock.from_name(key)
		fcb.set_read_only(entry.read_only)
		fcb.set_system(entry.system)
		return fcb

	def set_attributes(self, fcb):
		key, entry = self._get(fcb.filename)
		entry.read_only = fcb.is_read_only()
		entry.system = fcb.is_system()
		self.log("{k}: read_only={r} system={s}".format(k=key, r=entry.read_only, s=entry.system))

	def delete(self, name):
		key = to_8_3(name)
		entry = self.files.get(key)
		if entry is None:
			return False
		if entry.read_only:
			raise ReadOnly("File R/O: {n}".format(n=key))
		del self.files[key]
		self.log("deleted " + key)
		return True

	def create(self, name, data=b"", read_only=False, system=False):
		key = to_8_3(name)
		self.files[key] = _Entry(data, read_only=read_only, system=system)
		return key
