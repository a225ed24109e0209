"""Entrypoint for `python -m spacedash`."""

from .cli import main


if __name__ == "__main__":
    main()
