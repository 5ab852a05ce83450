"""Allow ``python -m tars``."""

from tars.cli import main

if __name__ == "__main__":
    main()
