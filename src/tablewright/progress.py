"""Progress reporting for CLI operations.

Reporters draw with ``rich.progress`` on the console they are given, so they
follow the same colorize decision as tables and messages.

Usage:
    reporter = select_reporter(quiet=args.quiet, non_interactive=not tty)
    reporter.start(len(items), "Uploading")
    for i, item in enumerate(items, 1):
        reporter.progress(i, len(items), item.name)
        ...
        reporter.success(item.name)
    reporter.finish(len(items))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TransferSpeedColumn,
)

BRAILLE_TICK_CHARS = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

DEFAULT_TICK_INTERVAL = 0.1


class ProgressReporter(ABC):
    """Reports progress during multi-item operations."""

    @abstractmethod
    def start(self, total: int, operation_name: str) -> None:
        """Called when a batch operation starts."""

    @abstractmethod
    def progress(self, current: int, total: int, item_name: str) -> None:
        """Called for every item as it is processed."""

    @abstractmethod
    def success(self, item_name: str) -> None:
        """Called when an item succeeds."""

    @abstractmethod
    def skip(self, item_name: str, reason: str) -> None:
        """Called when an item is skipped."""

    @abstractmethod
    def failure(self, item_name: str, error: str) -> None:
        """Called when an item fails."""

    @abstractmethod
    def finish(self, total: int) -> None:
        """Called when the batch operation finishes."""


class _BarReporter(ProgressReporter):
    """Shared plumbing for reporters backed by a single progress task."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def _begin(self, progress: Progress, description: str, total: int) -> None:
        self._task = progress.add_task(description, total=total)
        progress.start()
        self._progress = progress

    def _end(self) -> bool:
        """Stop the display; returns False if nothing was started."""
        if self._progress is None:
            return False
        self._progress.stop()
        self._progress = None
        self._task = None
        return True

    def progress(self, current: int, total: int, item_name: str) -> None:
        if self._progress is not None and self._task is not None:
            self._progress.advance(self._task)

    def success(self, item_name: str) -> None:
        pass

    def skip(self, item_name: str, reason: str) -> None:
        pass

    def failure(self, item_name: str, error: str) -> None:
        pass


class InteractiveReporter(_BarReporter):
    """Reporter drawing a progress bar, with a summary of failures at the end."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__(console)
        self.failures = 0

    def start(self, total: int, operation_name: str) -> None:
        progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=40, complete_style="green", finished_style="green", style="red"),
            MofNCompleteColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self.failures = 0
        self._begin(progress, operation_name, total)

    def failure(self, item_name: str, error: str) -> None:
        self.failures += 1

    def finish(self, total: int) -> None:
        if not self._end():
            return
        successes = max(total - self.failures, 0)
        if self.failures == 0:
            self.console.print(f"Completed: {total} items processed successfully")
        elif successes == 0:
            self.console.print(f"Failed: all {total} items failed")
        else:
            self.console.print(
                f"Completed with failures: {successes} succeeded, "
                f"{self.failures} failed of {total} total"
            )


class NonInteractiveReporter(_BarReporter):
    """Reporter for pipes and CI logs: a plain counter, no bar."""

    def start(self, total: int, operation_name: str) -> None:
        progress = Progress(
            TextColumn("{task.description}: {task.completed}/{task.total}"),
            TimeElapsedColumn(),
            console=self.console,
        )
        self._begin(progress, operation_name, total)

    def finish(self, total: int) -> None:
        if self._end():
            self.console.print(f"Completed: {total} items processed")


class QuietReporter(ProgressReporter):
    """Reporter that produces no output."""

    def start(self, total: int, operation_name: str) -> None:
        pass

    def progress(self, current: int, total: int, item_name: str) -> None:
        pass

    def success(self, item_name: str) -> None:
        pass

    def skip(self, item_name: str, reason: str) -> None:
        pass

    def failure(self, item_name: str, error: str) -> None:
        pass

    def finish(self, total: int) -> None:
        pass


def select_reporter(
    quiet: bool,
    non_interactive: bool,
    console: Console | None = None,
) -> ProgressReporter:
    """Select a progress reporter from mode flags; quiet wins over non-interactive."""
    if quiet:
        return QuietReporter()
    if non_interactive:
        return NonInteractiveReporter(console)
    return InteractiveReporter(console)


class SpinnerReporter:
    """Spinner for operations of unknown length.

    Attributes:
        tick_chars: Animation frames.
        tick_interval: Seconds between frames.
    """

    def __init__(
        self,
        console: Console | None = None,
        tick_chars: Sequence[str] = BRAILLE_TICK_CHARS,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        self.console = console or Console()
        self.tick_chars = tuple(tick_chars)
        self.tick_interval = tick_interval
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def with_tick_chars(self, chars: Sequence[str]) -> SpinnerReporter:
        """Use custom animation frames."""
        self.tick_chars = tuple(chars)
        return self

    def with_tick_interval(self, interval: float) -> SpinnerReporter:
        """Set the time between frames, in seconds."""
        self.tick_interval = interval
        return self

    def start(self, message: str) -> None:
        """Start spinning with ``message`` next to the spinner."""
        spinner = SpinnerColumn("dots", style="green")
        spinner.spinner.frames = list(self.tick_chars)
        spinner.spinner.interval = self.tick_interval * 1000
        progress = Progress(
            spinner,
            TextColumn("{task.description}"),
            console=self.console,
            refresh_per_second=max(1 / self.tick_interval, 1),
        )
        self._task = progress.add_task(message, total=None)
        progress.start()
        self._progress = progress

    def set_message(self, message: str) -> None:
        if self._progress is not None and self._task is not None:
            self._progress.update(self._task, description=message)

    def finish(self, message: str) -> None:
        """Stop the spinner, leaving ``message`` on screen."""
        if self._progress is None:
            return
        self.set_message(message)
        self._progress.stop()
        self._progress = None

    def finish_and_clear(self) -> None:
        """Stop the spinner and remove it from the screen."""
        if self._progress is None:
            return
        self._progress.live.transient = True
        self._progress.stop()
        self._progress = None


class DownloadReporter:
    """Progress bar for downloads, showing bytes transferred and speed."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def start(self, total_bytes: int, message: str) -> None:
        progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan"),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self._task = progress.add_task(message, total=total_bytes)
        progress.start()
        self._progress = progress

    def add_bytes(self, count: int) -> None:
        """Record ``count`` more downloaded bytes."""
        if self._progress is not None and self._task is not None:
            self._progress.advance(self._task, count)

    def set_position(self, position: int) -> None:
        """Set the number of bytes downloaded so far."""
        if self._progress is not None and self._task is not None:
            self._progress.update(self._task, completed=position)

    def set_message(self, message: str) -> None:
        if self._progress is not None and self._task is not None:
            self._progress.update(self._task, description=message)

    def completed(self) -> int:
        """Bytes downloaded so far."""
        if self._progress is None or self._task is None:
            return 0
        return int(self._progress.tasks[0].completed)

    def finish(self, message: str) -> None:
        """Stop the bar, leaving ``message`` on screen."""
        if self._progress is None:
            return
        self.set_message(message)
        self._progress.stop()
        self._progress = None

    def finish_and_clear(self) -> None:
        """Stop the bar and remove it from the screen."""
        if self._progress is None:
            return
        self._progress.live.transient = True
        self._progress.stop()
        self._progress = None
