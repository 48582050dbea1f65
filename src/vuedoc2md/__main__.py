"""Module entry point for running with python -m vuedoc2md."""

from vuedoc2md.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
