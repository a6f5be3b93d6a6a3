"""Module entrypoint for ``python -m panewalk``.

All argument parsing and runtime setup happen in ``panewalk.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
