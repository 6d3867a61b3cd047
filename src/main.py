"""Run script.

Lets the CLI run with `python -m main` from `src/` during development, next
to the `neo-tracker` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
