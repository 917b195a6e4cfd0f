from safebackup.main import main

main()  # pragma: no cover
