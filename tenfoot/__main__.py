"""Entrypoint for `python -m tenfoot`."""

from .cli import main


if __name__ == "__main__":
    main()
