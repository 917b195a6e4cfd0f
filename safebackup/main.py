"""Program entry point (CLI dispatcher).

The interactive flow lives in the click command; main remains a thin wrapper.
"""
from __future__ import annotations
from safebackup.cli.commands import cli

def main():  # pragma: no cover - thin wrapper
	cli()

if __name__ == '__main__':  # pragma: no cover
	main()
