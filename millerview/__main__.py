"""Module entrypoint for ``python -m millerview``.

All argument parsing and runtime setup happen in ``millerview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
