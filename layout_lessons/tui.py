from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Static

from .config import Settings
from .lesson_list import SelectableLessonList
from .session import InputResult, TrainingSession
from .stats import TrainingRecord
from .storage import PersistenceError, save_lesson_list
from .trainer import AppState, InputEvent, SpecialKey, TrainerApp

logger = logging.getLogger(__name__)

SPECIAL_KEYS: Dict[str, SpecialKey] = {
    "up": SpecialKey.UP,
    "down": SpecialKey.DOWN,
    "enter": SpecialKey.ENTER,
    "escape": SpecialKey.ESCAPE,
}

BAR_LEN = 34
CHART_WIDTH = 30


# ---------------------------
# Rendering
# ---------------------------

def render_lesson_list(lesson_list: SelectableLessonList, theme: Dict[str, str]) -> Text:
    text = Text()
    text.append("Lessons", style=f"bold {theme['title']}")
    text.append("  (up/down to choose, enter to start)\n", style=theme["muted"])
    if not lesson_list.lessons:
        text.append("No lessons available.\n", style=theme["muted"])
        return text
    for index, lesson in enumerate(lesson_list.lessons):
        selected = index == lesson_list.selected_index
        runs = len(lesson_list.records(index))
        text.append("> " if selected else "  ", style=theme["selected"])
        text.append(f"{lesson.name:<10}", style=f"bold {theme['selected']}" if selected else theme["title"])
        text.append(f" {' '.join(lesson.chars)}", style=theme["upcoming"])
        if runs:
            text.append(f"  ({runs} runs)", style=theme["muted"])
        text.append("\n", style="")
    return text


def render_history(records: Sequence[TrainingRecord], theme: Dict[str, str], size: int = 20) -> Text:
    """Horizontal bar chart of words per minute, newest run last."""
    text = Text()
    text.append("History", style=f"bold {theme['title']}")
    recent = list(records)[-size:]
    if not recent:
        text.append("\nNo runs for this lesson yet.", style=theme["muted"])
        return text
    best = max(r.stats.typing_speed.words_per_minute() for r in recent)
    text.append(f"  best {best} wpm over last {len(recent)}", style=theme["muted"])
    for record in recent:
        wpm = record.stats.typing_speed.words_per_minute()
        filled = 0 if best == 0 else round(CHART_WIDTH * wpm / best)
        text.append("\n", style="")
        text.append(record.timestamp.strftime("%Y-%m-%d %H:%M "), style=theme["muted"])
        if filled:
            text.append("█" * filled, style=theme["bar_fg"])
        if CHART_WIDTH - filled:
            text.append("·" * (CHART_WIDTH - filled), style=theme["bar_bg"])
        text.append(f" {wpm:>3} wpm", style=f"bold {theme['title']}")
        text.append(f" {record.stats.errors:>3} err", style=theme["bad"] if record.stats.errors else theme["muted"])
    return text


def render_diff(session: TrainingSession, theme: Dict[str, str]) -> Text:
    diff = session.diff()
    text = Text()
    if diff.typed:
        text.append(diff.typed, style=f"bold {theme['ok']}")
    if diff.current:
        colour = theme["bad"] if diff.last_result is InputResult.WRONG else theme["current"]
        text.append(diff.current, style=f"bold {colour} underline")
    if diff.remaining:
        text.append(diff.remaining, style=theme["upcoming"])
    return text


def render_stats(session: TrainingSession, theme: Dict[str, str]) -> Text:
    progress = session.progress()
    filled = int(BAR_LEN * min(1.0, max(0.0, progress)))
    speed = session.typing_speed()
    elapsed = int(session.elapsed().total_seconds())

    text = Text()
    text.append("Time ", style=theme["muted"])
    text.append(f"{elapsed // 60:02d}:{elapsed % 60:02d}", style=f"bold {theme['title']}")
    text.append("  ", style=theme["muted"])
    text.append(f"{int(progress * 100):>3}%", style=theme["bar_fg"])
    text.append("\n", style="")
    text.append("[", style=theme["muted"])
    if filled:
        text.append("=" * filled, style=theme["bar_fg"])
    if BAR_LEN - filled:
        text.append("." * (BAR_LEN - filled), style=theme["bar_bg"])
    text.append("]", style=theme["muted"])
    text.append("\n", style="")
    text.append("WPM ", style=theme["muted"])
    text.append(f"{speed.words_per_minute():>4}", style=f"bold {theme['title']}")
    text.append("   CPM ", style=theme["muted"])
    text.append(f"{speed.characters_per_minute():>4}", style=f"bold {theme['title']}")
    text.append("   Errors ", style=theme["muted"])
    text.append(f"{session.errors()}", style=f"bold {theme['bad'] if session.errors() else theme['title']}")
    return text


def render_help(state: AppState, session: Optional[TrainingSession], theme: Dict[str, str]) -> Text:
    text = Text()
    if state is AppState.TRAINING:
        if session is not None and not session.is_started():
            text.append("Start typing to begin. ", style=theme["hint"])
        text.append("Esc back to lessons", style=theme["hint"])
    else:
        text.append("Enter start", style=theme["hint"])
        text.append("  ", style=theme["muted"])
        text.append("Esc quit", style=theme["hint"])
    text.append("  ", style=theme["muted"])
    text.append("Ctrl+T theme", style=theme["hint"])
    return text


def to_input_event(event: events.Key) -> InputEvent:
    special = SPECIAL_KEYS.get(event.key)
    if special is not None:
        return special
    if event.is_printable and event.character and len(event.character) == 1:
        return event.character
    return None


# ---------------------------
# UI widgets
# ---------------------------

class LessonPanel(Static):
    """Lesson list with the selection cursor."""


class HistoryChart(Static):
    """Past runs of the highlighted lesson."""


class PromptView(Static):
    """Practice text: typed / current / remaining."""


class StatsBar(Static):
    """Live stats line."""


class HelpBar(Static):
    """Help / controls."""


# ---------------------------
# App
# ---------------------------

class LessonTrainerTUI(App):
    CSS = """
    Screen {
        background: transparent;
    }

    #root {
        height: 100%;
        padding: 1 2;
    }

    LessonPanel {
        border: round #1f2937;
        padding: 0 2;
        height: auto;
    }

    HistoryChart {
        border: round #1f2937;
        padding: 0 2;
        height: 1fr;
    }

    PromptView {
        border: round #1f2937;
        padding: 1 2;
        height: 1fr;
    }

    StatsBar {
        border: round #1f2937;
        padding: 0 2;
        height: 5;
    }

    HelpBar {
        border: round #1f2937;
        padding: 0 2;
        height: 3;
    }
    """

    TITLE = "Layout Lessons"
    SUB_TITLE = "touch typing, one key at a time"

    BINDINGS = [
        ("ctrl+t", "cycle_theme", "Theme"),
    ]

    ESCAPE_TO_MINIMIZE = False

    def __init__(self, trainer: TrainerApp, settings: Settings, data_path: Optional[Path] = None) -> None:
        super().__init__()
        self.trainer = trainer
        self.settings = settings
        self.data_path = data_path

    def compose(self) -> ComposeResult:
        with Container(id="root"):
            self.lesson_panel = LessonPanel()
            self.history_chart = HistoryChart()
            self.prompt_view = PromptView()
            self.stats_bar = StatsBar()
            self.help_bar = HelpBar()
            yield self.lesson_panel
            yield self.history_chart
            yield self.prompt_view
            yield self.stats_bar
            yield self.help_bar

    def on_mount(self) -> None:
        self.apply_theme()
        self._render_all()
        self.set_interval(0.1, self._tick)

    def apply_theme(self) -> None:
        palette = self.settings.palette
        self.screen.styles.background = palette["screen_bg"]
        self.lesson_panel.styles.background = palette["card_bg"]
        self.history_chart.styles.background = palette["card_bg"]
        self.prompt_view.styles.background = palette["prompt_bg"]
        self.stats_bar.styles.background = palette["stats_bg"]
        self.help_bar.styles.background = palette["stats_bg"]
        border_def = (("round", palette["border"]),)
        for widget in (self.lesson_panel, self.history_chart, self.prompt_view, self.stats_bar, self.help_bar):
            widget.styles.border = border_def

    def action_cycle_theme(self) -> None:
        names: List[str] = list(self.settings.palettes.keys())
        current = names.index(self.settings.theme) if self.settings.theme in names else -1
        self.settings.theme = names[(current + 1) % len(names)]
        self.apply_theme()
        self._render_all()

    async def action_quit(self) -> None:
        self._finish()

    def on_key(self, event: events.Key) -> None:
        input_event = to_input_event(event)
        if input_event is None:
            return
        event.stop()
        self.trainer.tick(input_event)
        if self.trainer.state is AppState.TERMINATED:
            self._finish()
            return
        self._render_all()

    def _tick(self) -> None:
        self.trainer.tick(None)
        if self.trainer.state is AppState.TRAINING:
            self._render_stats()

    def save_snapshot(self) -> bool:
        if self.data_path is None:
            return True
        try:
            save_lesson_list(self.trainer.lesson_list, self.data_path)
        except PersistenceError as exc:
            logger.error("%s", exc)
            return False
        return True

    def _finish(self) -> None:
        if self.save_snapshot():
            self.exit()
        else:
            self.exit(return_code=1, message=f"Could not save progress to {self.data_path}")

    def _render_all(self) -> None:
        training = self.trainer.state is AppState.TRAINING
        self.lesson_panel.styles.display = "none" if training else "block"
        self.history_chart.styles.display = "none" if training else "block"
        self.prompt_view.styles.display = "block" if training else "none"
        self.stats_bar.styles.display = "block" if training else "none"

        theme = self.settings.palette
        if training:
            self._render_prompt()
            self._render_stats()
        else:
            lesson_list = self.trainer.lesson_list
            self.lesson_panel.update(render_lesson_list(lesson_list, theme))
            self.history_chart.update(
                render_history(lesson_list.current_lesson_records(), theme, self.settings.history_chart_size)
            )
        self.help_bar.update(render_help(self.trainer.state, self.trainer.session, theme))

    def _render_prompt(self) -> None:
        session = self.trainer.session
        if session is not None:
            self.prompt_view.update(render_diff(session, self.settings.palette))

    def _render_stats(self) -> None:
        session = self.trainer.session
        if session is not None:
            self.stats_bar.update(render_stats(session, self.settings.palette))
