"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import random
from functools import partial
from pathlib import Path
from typing import List, Optional, Sequence

from . import __version__
from .config import Settings, default_data_dir, load_settings
from .curriculum import CURRICULA
from .lesson import Lesson
from .storage import load_or_create
from .trainer import TrainerApp
from .tui import LessonTrainerTUI

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layout-lessons",
        description="Practice touch typing on a growing set of keys.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json.")
    parser.add_argument("--log-file", type=Path, default=None, help="Where to write the log.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages.")

    sub = parser.add_subparsers(dest="command")
    train = sub.add_parser("train", help="Open the trainer (default).")
    train.add_argument("--data", type=Path, default=None, help="Path to the lesson history file.")

    generate = sub.add_parser("generate", help="Write one practice text per lesson.")
    generate.add_argument("out_dir", type=Path, help="Directory for lesson<N>.txt files.")
    generate.add_argument("--seed", type=int, default=None, help="Seed for reproducible texts.")
    return parser


def configure_logging(log_file: Path, verbose: bool) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def curriculum_lessons(settings: Settings) -> List[Lesson]:
    return CURRICULA[settings.curriculum](
        lesson_length=settings.lesson_length,
        word_length=settings.word_length,
        focus_multiplier=settings.focus_multiplier,
    )


def write_lesson_texts(lessons: Sequence[Lesson], out_dir: Path, rng: Optional[random.Random] = None) -> List[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for number, lesson in enumerate(lessons):
        path = out_dir / f"lesson{number}.txt"
        path.write_text(lesson.generate_lesson_content(rng), encoding="utf-8")
        written.append(path)
    return written


def run_generate(settings: Settings, out_dir: Path, seed: Optional[int]) -> int:
    rng = random.Random(seed)
    for path in write_lesson_texts(curriculum_lessons(settings), out_dir, rng):
        print(path)
    return 0


def run_train(settings: Settings, data_path: Path) -> int:
    lesson_list = load_or_create(data_path, partial(curriculum_lessons, settings))
    app = LessonTrainerTUI(TrainerApp(lesson_list), settings, data_path)
    app.run()
    return app.return_code or 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    data_dir = default_data_dir()
    configure_logging(args.log_file or data_dir / "layout-lessons.log", args.verbose)
    settings = load_settings(args.config or data_dir / "config.json")

    if args.command == "generate":
        return run_generate(settings, args.out_dir, args.seed)
    data_path = getattr(args, "data", None) or data_dir / "lessons.json"
    logger.info("starting trainer with %s", data_path)
    return run_train(settings, data_path)


def main_entry() -> None:
    raise SystemExit(main())
