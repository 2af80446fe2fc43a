"""Touch-typing lessons on a growing set of keys, in the terminal."""

from __future__ import annotations

__version__ = "0.3.0"
