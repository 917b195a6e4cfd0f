"""Project configuration settings.

Constants only. Nothing here is read from the environment; every path
is relative to the working directory the program is started in.
"""

# Files
BACKUP_SUFFIX = ".bak"
LOG_FILENAME = "logfile.txt"
LOG_LINE_FORMAT = "{timestamp} - {message}\n"

# Console text
BANNER = "=== SafeBackup ==="
FILENAME_PROMPT = "Please enter your file name"
COMMAND_PROMPT = "Please enter your command (backup, restore, delete)"
PAUSE_PROMPT = "Press any key to exit..."

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1

__all__ = [
	'BACKUP_SUFFIX','LOG_FILENAME','LOG_LINE_FORMAT',
	'BANNER','FILENAME_PROMPT','COMMAND_PROMPT','PAUSE_PROMPT',
	'EXIT_OK','EXIT_FAILURE'
]
