"""The drive for a directory of the local filesystem."""
import os
import stat

from .base import BaseDrive, FileControlBlock, to_8_3
from .errors import NotFound, OperationFailure, ReadOnly

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


class LocalDrive(BaseDrive):
	"""
	A drive backed by a directory on the local filesystem.
	A name given as the host spells it (in any case) addresses that file;
	otherwise host files are matched by their 8.3 name, which must not be
	shared by two host files. The R/O attribute maps to the write
	permission bits. The local filesystem has no SYS attribute, so it is
	always reported as cleared.
	"""
	def __init__(self, basepath=".", logger=None):
		BaseDrive.__init__(self, logger)
		self.basepath = os.path.abspath(basepath)

	def repr(self):
		return "Local Directory '{bp}'".format(bp=self.basepath)

	def _hostfiles(self):
		"""returns a sorted list of the host names of all regular files."""
		try:
			names = sorted(os.listdir(self.basepath))
		except OSError as e:
			raise OperationFailure(str(e))
		return [n for n in names if os.path.isfile(os.path.join(self.basepath, n))]

	def _matches(self, name):
		"""returns the host names name refers to."""
		names = self._hostfiles()
		if name in names:
			return [name]
		found = [n for n in names if n.lower() == name.lower()]
		if found:
			return found
		key = to_8_3(name)
		return [n for n in names if to_8_3(n) == key]

	def _getabs(self, name):
		"""returns the host path for name or raises NotFound."""
		found = self._matches(name)
		if not found:
			raise NotFound("Not found: {n}".format(n=to_8_3(name)))
		if len(found) > 1:
			raise OperationFailure("Ambiguous name {n}: {f}".format(n=name, f=", ".join(found)))
		return os.path.join(self.basepath, found[0])

	def listdir(self):
		return sorted(set(to_8_3(n) for n in self._hostfiles()))

	def exists(self, name):
		return len(self._matches(name)) > 0

	def open(self, name):
		ap = self._getabs(name)
		try:
			mode = os.stat(ap).st_mode
		except OSError as e:
			raise OperationFailure(str(e))
		fcb = FileControlBlock.from_name(to_8_3(name))
		fcb.set_read_only(not mode & stat.S_IWUSR)
		fcb.handle = ap
		return fcb

	def set_attributes(self, fcb):
		ap = fcb.handle or self._getabs(fcb.filename)
		try:
			mode = stat.S_IMODE(os.stat(ap).st_mode)
			if fcb.is_read_only():
				mode &= ~_WRITE_BITS
			else:
				mode |= stat.S_IWUSR
			os.chmod(ap, mode)
		except OSError as e:
			raise OperationFailure(str(e))
		if fcb.is_system():
			self.log("{f}: SYS attribute is not supported on local drives".format(f=fcb.filename))
		self.log("{f}: mode={m:o}".format(f=ap, m=mode))

	def delete(self, name):
		try:
			ap = self._getabs(name)
		except NotFound:
			return False
		try:
			mode = os.stat(ap).st_mode
		except OSError as e:
			raise OperationFailure(str(e))
		if not mode & stat.S_IWUSR:
			raise ReadOnly("File R/O: {n}".format(n=to_8_3(name)))
		try:
			os.remove(ap)
		except OSError as e:
			raise OperationFailure(str(e))
		self.log("deleted " + ap)
		return True

	def create(self, name, data=b"", read_only=False, system=False):
		key = to_8_3(name)
		found = self._matches(name)
		if len(found) == 1:
			ap = os.path.join(self.basepath, found[0])
		else:
			ap = os.path.join(self.basepath, key)
		try:
			if os.path.exists(ap):
				os.chmod(ap, stat.S_IMODE(os.stat(ap).st_mode) | stat.S_IWUSR)
			with open(ap, "wb") as fout:
				fout.write(data)
		except OSError as e:
			raise OperationFailure(str(e))
		if read_only or system:
			fcb = FileControlBlock.from_name(key)
			fcb.set_read_only(read_only)
			fcb.set_system(system)
			fcb.handle = ap
			self.set_attributes(fcb)
		return key
