"""Line-oriented console used by every screen.

Game text goes to stdout through a rich Console with markup disabled,
so item and character names are printed exactly as typed. Input is read
through an injectable function, which lets tests script a whole session.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from rich.console import Console
from rich.text import Text

from rpg_adventure.core.exceptions import InputClosedError
from rpg_adventure.core.logging import get_logger


logger = get_logger(__name__)

InputFunc = Callable[[str], str]


class GameConsole:
    """Plain text presenter.

    Args:
        input_func: Reads one line given a prompt. Defaults to ``input``.
        file: Output stream. Defaults to stdout.
        pause_enabled: Whether ``pause()`` waits for Enter.
    """

    def __init__(
        self,
        input_func: InputFunc | None = None,
        file: TextIO | None = None,
        *,
        pause_enabled: bool = True,
    ) -> None:
        self._input = input_func or input
        self._console = Console(
            file=file,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        self.pause_enabled = pause_enabled

    def emit(self, line: str = "") -> None:
        """Print one line."""
        self._console.print(Text(line))

    def emit_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.emit(line)

    def title(self, text: str) -> None:
        self.emit()
        self.emit(f"=== {text} ===")

    def read_line(self, prompt: str = "") -> str:
        """Read one line of input.

        Raises:
            InputClosedError: When the input stream is exhausted.
        """
        try:
            return self._input(prompt)
        except EOFError as e:
            logger.info("Input stream closed")
            raise InputClosedError("Input closed") from e

    def pause(self) -> None:
        """Wait for Enter before redrawing a menu."""
        if self.pause_enabled:
            self.read_line("Press Enter to continue...")


__all__ = [
    "InputFunc",
    "GameConsole",
]
