"""Allow ``python -m searchprobe``."""

from searchprobe.cli.main import main

if __name__ == "__main__":
    main()
