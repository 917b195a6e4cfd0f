"""Error kinds raised by the file operations and the command layer.

Plain `OSError` from the filesystem (permission denied, disk full,
file in use) is not wrapped; it reaches the caller unmodified.
"""
from __future__ import annotations

class SafeBackupError(Exception):
	pass

class InvalidInput(SafeBackupError):
	"""Unsafe filename or path component."""

class NotFound(SafeBackupError):
	"""Expected source or backup file is absent."""

class OperationFailed(SafeBackupError):
	"""A command failed; carries the command verb and the underlying cause."""

	def __init__(self, prefix: str, cause: BaseException):
		super().__init__(f"{prefix}: {cause}")
		self.prefix = prefix
		self.cause = cause
