"""Allow ``python -m exam_toolkit``."""

from exam_toolkit.cli.app import main

if __name__ == "__main__":
    raise SystemExit(main())
