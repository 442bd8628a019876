"""Entry point for ``python -m reckon``."""

from reckon.cli import main

if __name__ == "__main__":
    main()
