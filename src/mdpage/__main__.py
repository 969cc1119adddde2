"""Allow ``python -m mdpage``."""

from mdpage.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
