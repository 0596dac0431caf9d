"""Tests for console UI wrapper."""

import pytest
from io import StringIO
from unittest.mock import patch

from rich.console import Console

from mv_videos.exceptions import DiscoveryFailedError, FilesVanishedError
from mv_videos.ui.console import ConsoleUI


def _recording_ui() -> ConsoleUI:
    return ConsoleUI(console=Console(file=StringIO(), width=200, no_color=True))


class TestConsoleUI:
    """Tests for ConsoleUI class."""

    def test_initialization(self):
        """ConsoleUI initializes with Rich Console."""
        ui = ConsoleUI()
        assert ui.console is not None

    def test_no_color(self):
        """color=False disables colors."""
        ui = ConsoleUI(color=False)
        assert ui.console.no_color is True

    def test_set_color(self):
        """set_color toggles colors."""
        ui = ConsoleUI()
        ui.set_color(False)
        assert ui.console.no_color is True
        ui.set_color(True)
        assert ui.console.no_color is False

    @pytest.mark.parametrize("method", [
        "print_info", "print_warning", "print_error", "print_success",
    ])
    def test_styled_messages(self, method):
        """Styled helpers include the message."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            getattr(ui, method)("Some message")
            mock_print.assert_called_once()
            assert "Some message" in mock_print.call_args[0][0]

    def test_print_simulation(self):
        """print_simulation() prints with simulation styling."""
        ui = ConsoleUI()
        with patch.object(ui.console, 'print') as mock_print:
            ui.print_simulation("Simulation message")
            args = mock_print.call_args[0][0]
            assert "Simulation message" in args
            assert "SIMULATION" in args


class TestPrintErrorChain:
    """Tests for print_error_chain method."""

    def test_single_error(self):
        """Prints the error message."""
        ui = _recording_ui()

        ui.print_error_chain(FilesVanishedError(["/a/[1080p].mkv"]))

        output = ui.console.file.getvalue()
        assert "no longer exist" in output
        assert "/a/[1080p].mkv" in output
        assert "caused by" not in output

    def test_follows_causes(self):
        """Each cause is printed below the error."""
        ui = _recording_ui()
        try:
            try:
                raise OSError("permission denied")
            except OSError as e:
                raise DiscoveryFailedError("find x", 1) from e
        except DiscoveryFailedError as error:
            ui.print_error_chain(error)

        output = ui.console.file.getvalue()
        assert "find x" in output
        assert "caused by: permission denied" in output


class TestConsoleUITable:
    """Tests for table helpers."""

    def test_create_table_with_columns(self):
        """Creates a table with the given columns."""
        table = ConsoleUI().create_table("Moves", ["Source", "Destination"])

        assert table.title == "Moves"
        assert len(table.columns) == 2

    def test_print_panel(self):
        """Prints a panel."""
        ui = _recording_ui()

        ui.print_panel("content", title="Title")

        assert "content" in ui.console.file.getvalue()
