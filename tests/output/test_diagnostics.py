"""Tests for the diagnostics shell."""
from io import StringIO

import pytest
from rich.console import Console

from license_bundler.models.bundle import Verbosity
from license_bundler.output.diagnostics import Shell


def make_shell(verbosity: Verbosity) -> tuple[Shell, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, width=200)
    return Shell(console=console, verbosity=verbosity), buffer


def emit_all(shell: Shell) -> None:
    shell.info("checking LICENSE")
    shell.warn("low confidence")
    shell.error("no license")


class TestShell:
    """Tests for Shell severities and verbosity."""

    def test_normal_hides_info(self) -> None:
        """Test that info messages need verbose mode."""
        shell, buffer = make_shell(Verbosity.NORMAL)
        emit_all(shell)

        assert buffer.getvalue() == "warning: low confidence\nerror: no license\n"

    def test_verbose_shows_everything(self) -> None:
        """Test that verbose mode shows info messages."""
        shell, buffer = make_shell(Verbosity.VERBOSE)
        emit_all(shell)

        assert buffer.getvalue().splitlines() == [
            "checking LICENSE",
            "warning: low confidence",
            "error: no license",
        ]

    def test_quiet_shows_errors_only(self) -> None:
        """Test that quiet mode only shows errors."""
        shell, buffer = make_shell(Verbosity.QUIET)
        emit_all(shell)

        assert buffer.getvalue() == "error: no license\n"

    def test_markup_is_not_interpreted(self) -> None:
        """Test that brackets in messages are printed verbatim."""
        shell, buffer = make_shell(Verbosity.NORMAL)
        shell.error("foo has no license in [bold]/tmp[/bold]")

        assert "[bold]/tmp[/bold]" in buffer.getvalue()

    def test_long_lines_are_not_wrapped(self) -> None:
        """Test that long paths stay on one line."""
        shell, buffer = make_shell(Verbosity.NORMAL)
        shell.error("x" * 500)

        assert buffer.getvalue() == "error: " + "x" * 500 + "\n"

    @pytest.mark.parametrize("verbosity", list(Verbosity))
    def test_verbosity_property(self, verbosity: Verbosity) -> None:
        """Test that the verbosity is exposed."""
        shell, _ = make_shell(verbosity)
        assert shell.verbosity == verbosity
