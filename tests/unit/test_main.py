"""
Unit tests for the command line entry point.
"""
import io

import pytest

import main
from terminal import TerminalError


class BrokenTerminal:
    """Driver whose setup fails like a non-interactive stdin."""

    def __enter__(self):
        raise TerminalError("Standard input is not a terminal")

    def __exit__(self, exc_type, exc, tb) -> None:
        pass


class TestMain:
    """Test exit codes and cleanup paths."""

    def test_confirmed_quit_exits_zero(
        self, monkeypatch, fake_driver_factory
    ) -> None:
        """Quitting returns 0 and releases the terminal."""
        driver = fake_driver_factory(["q", "y"])
        monkeypatch.setattr(main, "TerminalDriver", lambda: driver)
        assert main.main([]) == 0
        assert driver.entered is True
        assert driver.restored is True

    def test_interrupt_exits_zero_after_restore(
        self, monkeypatch, fake_driver_factory
    ) -> None:
        """Ctrl+C mid-read still restores the terminal and exits 0."""
        driver = fake_driver_factory(["s", KeyboardInterrupt()])
        monkeypatch.setattr(main, "TerminalDriver", lambda: driver)
        assert main.main([]) == 0
        assert driver.restored is True

    def test_seed_reaches_the_field(
        self, monkeypatch, fake_driver_factory
    ) -> None:
        """--seed makes the mine layout reproducible."""
        layouts = []
        real_run = main.GameController.run

        def recording_run(controller):
            phase = real_run(controller)
            layouts.append(
                [cell.is_mine for cell in controller.field.cells()]
            )
            return phase

        monkeypatch.setattr(main.GameController, "run", recording_run)
        for _ in range(2):
            driver = fake_driver_factory([" ", "q", "y", "k"])
            monkeypatch.setattr(main, "TerminalDriver", lambda: driver)
            main.main(["--seed", "42"])
        assert layouts[0] == layouts[1]
        assert any(layouts[0])

    def test_terminal_failure_exits_one(self, monkeypatch, capsys) -> None:
        """Terminal setup failure is reported on stderr with status 1."""
        monkeypatch.setattr(main, "TerminalDriver", BrokenTerminal)
        assert main.main([]) == 1
        assert "not a terminal" in capsys.readouterr().err

    def test_real_driver_rejects_piped_stdin(self, monkeypatch) -> None:
        """Without an interactive stdin the real driver fails cleanly."""
        monkeypatch.setattr(main.sys, "stdin", io.StringIO("q"))
        assert main.main([]) == 1

    def test_unknown_option_is_rejected(self) -> None:
        """argparse rejects unsupported flags."""
        with pytest.raises(SystemExit):
            main.main(["--columns", "5"])
