"""Module entrypoint for ``python -m dirbrowse``."""

from .cli import main


if __name__ == "__main__":
    main()
