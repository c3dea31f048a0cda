"""Module entrypoint for ``python -m treeingest``.

All argument parsing and scan setup happen in ``treeingest.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
