"""A plain console progress bar."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class ProgressBar:
    """Progress bar over a 0-100 percentage."""

    progress: float = 0.0
    stream: TextIO | None = field(default=None, repr=False)

    def set_progress(self, prog: float) -> None:
        """Set the current percentage."""
        self.progress = prog

    def render(self) -> str:
        """Return the bar text, ending with a carriage return."""
        whole = int(self.progress)
        return "[" + "|" * (whole + 1) + " " * (100 - whole) + f"] {self.progress:g}%\r"

    def update(self) -> bool:
        """Print the bar when the progress is a whole percentage; report whether it was printed."""
        if int(100.0 * self.progress) % 100 != 0:
            return False
        out = self.stream if self.stream is not None else sys.stdout
        out.write(self.render())
        return True