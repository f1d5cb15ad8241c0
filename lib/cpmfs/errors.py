"""Errors and Exceptions."""


class OperationFailure(IOError):
	"""raise this if a drive operation (e.g. delete) fails.
	The drive is responsible for undoing errors."""
	pass


class NotFound(OperationFailure):
	"""raise this if a file does not exist on the drive."""
	pass


class InvalidDrive(NotFound):
	"""raise this if a drive letter is outside A: to P: or not mounted."""
	pass


class ReadOnly(OperationFailure):
	"""raise this if a file can not be changed because its R/O attribute is set."""
	pass
