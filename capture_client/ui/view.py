"""Abstract interface for rendering controller state."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

from capture_client.domain.models import ResultPanel


class StatusLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class View(ABC):
    """Everything the controller needs from a front end."""

    @abstractmethod
    def show_status(self, message: str, level: StatusLevel = StatusLevel.INFO) -> None:
        """Shows a transient status line."""

    @abstractmethod
    def show_processing(self, active: bool) -> None:
        """Toggles the processing indicator."""

    @abstractmethod
    def set_recording_controls(self, enabled: bool, capturing: bool) -> None:
        """Reflects whether recording is possible and currently running."""

    @abstractmethod
    def render_result(self, panel: ResultPanel) -> None:
        """Redraws the result panel."""

    @abstractmethod
    def start_level_meter(self, sample_bars: Callable[[], list[float]]) -> None:
        """
        Starts redrawing the level meter at the display refresh rate.

        Args:
            sample_bars: Called once per frame to get current bar heights.
        """

    @abstractmethod
    def stop_level_meter(self) -> None:
        """Stops the level meter; no frame is drawn after this returns."""
