"""Filename validation and resolution inside the base directory."""
from __future__ import annotations
import re, logging
from pathlib import Path
from config.settings import BACKUP_SUFFIX
from .errors import InvalidInput

log = logging.getLogger(__name__)

SEPARATORS = ('/', '\\')
_DRIVE_ROOT = re.compile(r'[A-Za-z]:[\\/]')

def is_safe(name: str) -> bool:
	"""Return False for names that traverse upwards or are rooted.

	Rejects any `..`, a leading separator, and drive-rooted forms like
	`C:\\` or `d:/`. Everything else is accepted.
	"""
	if '..' in name: return False
	if name.startswith(SEPARATORS): return False
	if _DRIVE_ROOT.match(name): return False
	return True

def resolve(base: Path, name: str) -> Path:
	"""Join `name` to `base` as a single path component.

	Raises InvalidInput for empty or unsafe names, for names with an
	internal separator and for names containing NUL.
	"""
	if name in ('', '.'):
		raise InvalidInput('not a file name')
	if not is_safe(name):
		raise InvalidInput('unsafe path')
	if any(sep in name for sep in SEPARATORS):
		raise InvalidInput('path separators are not allowed in a file name')
	if '\x00' in name:
		raise InvalidInput('NUL character in file name')
	path = Path(base) / name
	log.debug('resolved %r to %s', name, path)
	return path

def backup_name(name: str) -> str:
	return f"{name}{BACKUP_SUFFIX}"
