"""Append-only activity log.

Every completed or rejected action is recorded as one line
`<unix_seconds> - <message>` in the log file of the base directory.
Writing the log never fails the caller.
"""
from __future__ import annotations
import time, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional
import click
from config.settings import LOG_FILENAME, LOG_LINE_FORMAT

log = logging.getLogger(__name__)

Clock = Callable[[], float]

def timestamp(clock: Clock = time.time) -> int:
	"""Whole seconds since the Unix epoch, or 0 if the clock is unusable."""
	try:
		now = int(clock())
	except (OSError, OverflowError, ValueError):
		return 0
	return now if now > 0 else 0

@dataclass(frozen=True)
class LogEntry:
	timestamp: int
	message: str

	def line(self) -> str:
		return LOG_LINE_FORMAT.format(timestamp=self.timestamp, message=self.message)

class ActivityLog:
	def __init__(self, path: Optional[Path], clock: Clock = time.time):
		self.path = Path(path) if path is not None else None
		self.clock = clock

	@classmethod
	def for_base(cls, base: Path) -> 'ActivityLog':
		return cls(Path(base) / LOG_FILENAME)

	def append(self, message: str) -> LogEntry:
		entry = LogEntry(timestamp(self.clock), message)
		self._write(entry)
		return entry

	def _write(self, entry: LogEntry) -> None:
		try:
			with open(self.path, 'a', encoding='utf-8', errors='surrogateescape') as f:
				f.write(entry.line())
		except (OSError, ValueError) as e:
			log.warning('failed to write %s: %s', self.path, e)
			click.echo(f'Warning: failed to write logfile: {e}', err=True)

class MemoryActivityLog(ActivityLog):
	"""Keeps entries in memory instead of touching the filesystem."""

	def __init__(self, clock: Clock = time.time):
		super().__init__(None, clock)
		self.entries: List[LogEntry] = []

	def _write(self, entry: LogEntry) -> None:
		self.entries.append(entry)

	@property
	def messages(self) -> List[str]:
		return [e.message for e in self.entries]
