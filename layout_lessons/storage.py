"""JSON snapshot of the lesson list and its history.

Saving always rewrites the whole file: the snapshot is written next to the
target and moved into place, so a crash mid-write leaves the old file intact.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, List

from .lesson import Lesson
from .lesson_list import SelectableLessonList

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """The snapshot could not be read, parsed or written."""


def load_lesson_list(path: Path) -> SelectableLessonList:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PersistenceError(f"could not read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise PersistenceError(f"{path}: expected a JSON object at top level")
    try:
        lesson_list = SelectableLessonList.from_dict(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise PersistenceError(f"{path}: malformed snapshot: {exc}") from exc
    logger.info("loaded %d lessons from %s", len(lesson_list.lessons), path)
    return lesson_list


def save_lesson_list(lesson_list: SelectableLessonList, path: Path) -> None:
    payload = json.dumps(lesson_list.to_dict(), indent=2)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise PersistenceError(f"could not write {path}: {exc}") from exc
    logger.info("saved lesson history to %s", path)


def load_or_create(path: Path, curriculum: Callable[[], List[Lesson]]) -> SelectableLessonList:
    """Load the snapshot at ``path``, or start over from ``curriculum``.

    A missing file is the normal first run. A broken one is moved aside to
    ``<name>.bak`` so the next save does not destroy it.
    """
    if not path.exists():
        logger.info("no snapshot at %s, starting from the curriculum", path)
        return SelectableLessonList(curriculum())
    try:
        return load_lesson_list(path)
    except PersistenceError as exc:
        logger.warning("%s; starting from the curriculum", exc)
        backup = path.with_name(path.name + ".bak")
        try:
            os.replace(path, backup)
        except OSError as move_exc:
            logger.warning("could not move %s aside: %s", path, move_exc)
        else:
            logger.warning("kept unreadable snapshot as %s", backup)
        return SelectableLessonList(curriculum())
