"""Module entry point for ``python -m logicalcluster``."""

from logicalcluster.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
