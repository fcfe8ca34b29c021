"""Allow ``python -m sexpand``."""

from sexpand.cli import main

if __name__ == "__main__":
    main()
