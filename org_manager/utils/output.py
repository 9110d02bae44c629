"""Progress output that reaches the terminal one fragment at a time."""

from typing import Optional

from rich.console import Console


class ProgressOutput:
    """Prints progress fragments and flushes after each one.

    Fragments are printed verbatim, without markup or wrapping, as they
    may contain raw response bodies.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def write(self, fragment: str) -> None:
        self.console.print(fragment, end="", markup=False, emoji=False, highlight=False, soft_wrap=True)
        self.console.file.flush()

    def line(self, text: str = "") -> None:
        self.write(f"{text}\n")
