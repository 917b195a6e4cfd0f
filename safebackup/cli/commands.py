"""Interactive shell implemented with click.

`run_command` holds the dispatch logic and only returns or raises;
the `cli` command is the driver that prompts, prints, pauses and picks
the exit code.
"""
from __future__ import annotations
import enum, click
from pathlib import Path
from typing import Optional
from config.settings import (
	BANNER, FILENAME_PROMPT, COMMAND_PROMPT, PAUSE_PROMPT, EXIT_OK, EXIT_FAILURE
)
from safebackup.lib import operations
from safebackup.lib.activity import ActivityLog
from safebackup.lib.errors import OperationFailed, SafeBackupError
from safebackup.lib.paths import is_safe

class Command(enum.Enum):
	BACKUP = 'backup'
	RESTORE = 'restore'
	DELETE = 'delete'

	@classmethod
	def parse(cls, text: str) -> Optional['Command']:
		"""Exact, case-sensitive match; None means unrecognized."""
		for member in cls:
			if member.value == text:
				return member
		return None

_FAILURE_PREFIX = {
	Command.BACKUP: 'Failed to create backup',
	Command.RESTORE: 'Failed to restore',
	Command.DELETE: 'Failed to delete',
}

def run_command(base: Path, filename: str, command: Command, activity: ActivityLog) -> str:
	"""Run one command and return the confirmation to show the user.

	Raises OperationFailed wrapping the InvalidInput, NotFound or OSError
	that stopped the operation.
	"""
	try:
		if command is Command.BACKUP:
			dst = operations.backup(base, filename, activity)
			return f'Your backup created: {dst.name}'
		if command is Command.RESTORE:
			operations.restore(base, filename, activity)
			return f'File restored: {filename}'
		operations.delete(base, filename, activity)
		return f'File deleted: {filename}'
	except (SafeBackupError, OSError) as e:
		raise OperationFailed(_FAILURE_PREFIX[command], e) from e

def _finish(code: int, pause: bool):
	if pause:
		click.pause(PAUSE_PROMPT)
	raise SystemExit(code)

@click.command()
@click.option('--filename', help='File to act on; prompted for when omitted.')
@click.option('--command', 'command_text', help='backup, restore or delete; prompted for when omitted.')
@click.option('--no-pause', is_flag=True, help='Exit without waiting for a key press.')
def cli(filename, command_text, no_pause):
	"""Back up, restore or delete a file in the current directory."""
	pause = not no_pause
	try:
		base = Path.cwd()
	except OSError as e:
		click.echo(f'Error: cannot determine working directory: {e}', err=True)
		raise SystemExit(EXIT_FAILURE)
	activity = ActivityLog.for_base(base)

	click.echo(BANNER)
	if filename is None:
		filename = click.prompt(FILENAME_PROMPT)
	filename = filename.strip()
	if not is_safe(filename):
		click.echo('Error: unsafe filename detected.', err=True)
		activity.append(f'rejected unsafe filename input: {filename}')
		_finish(EXIT_FAILURE, pause)

	if command_text is None:
		command_text = click.prompt(COMMAND_PROMPT)
	command = Command.parse(command_text.strip())
	if command is None:
		click.echo('Invalid command.', err=True)
		_finish(EXIT_FAILURE, pause)

	try:
		click.echo(run_command(base, filename, command, activity))
	except OperationFailed as e:
		click.echo(str(e), err=True)
		_finish(EXIT_FAILURE, pause)
	_finish(EXIT_OK, pause)
