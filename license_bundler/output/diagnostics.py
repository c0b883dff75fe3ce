"""Diagnostic messages for bundle runs, rendered with Rich."""
from typing import Optional

from rich.console import Console
from rich.text import Text

from license_bundler.models.bundle import Verbosity


class Shell:
    """Diagnostics sink with info, warning and error severities.

    Messages are printed without Rich markup parsing so that paths and
    license names containing brackets appear verbatim.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the shell.

        Args:
            console: Optional Rich Console instance. Defaults to a console
                writing to stderr, keeping stdout free for the bundle.
            verbosity: Which severities are shown. Info messages need
                VERBOSE; QUIET shows errors only.
        """
        self._console = console if console is not None else Console(stderr=True)
        self._verbosity = verbosity

    @property
    def verbosity(self) -> Verbosity:
        return self._verbosity

    def info(self, message: str) -> None:
        if self._verbosity == Verbosity.VERBOSE:
            self._console.print(
                Text(message, style="dim"), highlight=False, soft_wrap=True
            )

    def warn(self, message: str) -> None:
        if self._verbosity == Verbosity.QUIET:
            return
        line = Text("warning: ", style="bold yellow")
        line.append(message)
        self._console.print(line, highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        line = Text("error: ", style="bold red")
        line.append(message)
        self._console.print(line, highlight=False, soft_wrap=True)
