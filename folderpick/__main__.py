"""Module entrypoint for ``python -m folderpick``.

All argument parsing and runtime setup happen in ``folderpick.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
