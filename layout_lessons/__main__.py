"""Module entrypoint for `python -m layout_lessons`."""

from __future__ import annotations

from .cli import main_entry

if __name__ == "__main__":  # pragma: no cover
    main_entry()
