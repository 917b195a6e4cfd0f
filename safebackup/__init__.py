"""SafeBackup: back up, restore or delete one file in the working directory."""
