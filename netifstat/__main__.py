"""Allow ``python -m netifstat``."""

from netifstat.cli import main

if __name__ == "__main__":
    main()
