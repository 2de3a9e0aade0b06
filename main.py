"""Command line entry point for rendering logo variants."""

from logocraft.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
