"""Backup, restore and delete of a single file in the base directory.

Each operation resolves its paths through `paths.resolve`, checks for
missing files before touching anything, and records one activity entry
on success. Filesystem errors propagate as plain OSError.
"""
from __future__ import annotations
import shutil, logging
from pathlib import Path
from .activity import ActivityLog
from .errors import NotFound
from .paths import resolve, backup_name

log = logging.getLogger(__name__)

def backup(base: Path, filename: str, activity: ActivityLog) -> Path:
	"""Copy `filename` to `filename.bak`, replacing any earlier backup."""
	src = resolve(base, filename)
	if not src.exists():
		raise NotFound('source not found')
	bak = backup_name(filename)
	dst = resolve(base, bak)
	shutil.copyfile(src, dst)
	log.debug('copied %s -> %s', src, dst)
	activity.append(f"backup {filename} -> {bak}")
	return dst

def restore(base: Path, filename: str, activity: ActivityLog) -> Path:
	"""Copy `filename.bak` over `filename`. The target need not exist."""
	bak = backup_name(filename)
	src = resolve(base, bak)
	if not src.exists():
		raise NotFound('backup not found')
	dst = resolve(base, filename)
	shutil.copyfile(src, dst)
	log.debug('copied %s -> %s', src, dst)
	activity.append(f"restore {filename} <- {bak}")
	return dst

def delete(base: Path, filename: str, activity: ActivityLog) -> None:
	path = resolve(base, filename)
	if not path.exists():
		raise NotFound('file not found')
	path.unlink()
	log.debug('removed %s', path)
	activity.append(f"delete {filename}")
