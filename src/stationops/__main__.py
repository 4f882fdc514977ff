"""Entry point for ``python -m stationops``."""

from stationops.cli import main

if __name__ == "__main__":
    main()
