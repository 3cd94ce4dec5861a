"""Allow ``python -m promptpath``."""

from promptpath.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
