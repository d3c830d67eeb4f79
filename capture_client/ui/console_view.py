"""rich terminal implementation of the View interface."""

from collections.abc import Callable

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from capture_client.domain.level_meter import MAX_BAR_HEIGHT, MIN_BAR_HEIGHT
from capture_client.domain.models import ResultPanel

from .view import StatusLevel, View

BAR_GLYPHS = "▁▂▃▄▅▆▇█"
STATUS_STYLES = {
    StatusLevel.INFO: "cyan",
    StatusLevel.SUCCESS: "green",
    StatusLevel.ERROR: "bold red",
}


class _LevelMeter:
    """Renderable that samples fresh bar heights each time it is drawn."""

    def __init__(self, sample_bars: Callable[[], list[float]]):
        self._sample_bars = sample_bars

    def __rich__(self) -> Text:
        text = Text("● Recording... ", style="bold red")
        span = MAX_BAR_HEIGHT - MIN_BAR_HEIGHT
        for height in self._sample_bars():
            level = (height - MIN_BAR_HEIGHT) / span
            glyph = BAR_GLYPHS[round(level * (len(BAR_GLYPHS) - 1))]
            text.append(glyph * 2 + " ", style="magenta")
        text.append(" (type 'stop' to finish)", style="dim")
        return text


class ConsoleView(View):
    def __init__(self, console: Console | None = None, refresh_rate: int = 60):
        self._console = console or Console()
        self._refresh_rate = refresh_rate
        self._live: Live | None = None
        self._status = None

    def show_status(self, message: str, level: StatusLevel = StatusLevel.INFO) -> None:
        self._console.print(Text(message, style=STATUS_STYLES[level]))

    def show_processing(self, active: bool) -> None:
        if active and self._status is None:
            self._status = self._console.status("Processing audio...")
            self._status.start()
        elif not active and self._status is not None:
            self._status.stop()
            self._status = None

    def set_recording_controls(self, enabled: bool, capturing: bool) -> None:
        if not enabled:
            self._console.print(Text("Recording disabled", style="dim"))
        elif not capturing:
            self._console.print(Text("Ready to record", style="dim"))

    def render_result(self, panel: ResultPanel) -> None:
        body = Text(panel.text, style="dim italic" if panel.is_placeholder else "")
        if panel.metadata_visible:
            meta = Table.grid(padding=(0, 2))
            meta.add_row("Confidence", panel.confidence or "")
            meta.add_row("Words", str(panel.word_count))
            meta.add_row("Duration", panel.duration or "")
            meta.add_row("Model", panel.model or "")
            self._console.print(Panel(body, title="Transcription"))
            self._console.print(meta)
        else:
            self._console.print(Panel(body, title="Transcription"))
        actions = "copy · download · clear" if panel.actions_enabled else "no actions"
        self._console.print(Text(actions, style="dim"))

    def start_level_meter(self, sample_bars: Callable[[], list[float]]) -> None:
        self.stop_level_meter()
        self._live = Live(
            _LevelMeter(sample_bars),
            console=self._console,
            refresh_per_second=self._refresh_rate,
            transient=True,
        )
        self._live.start()

    def stop_level_meter(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
