import os

import pytest
from pydantic import ValidationError

from climg.terminal import TerminalGeometry, query_terminal_size


def test_query_reports_terminal_size(mocker) -> None:
    mocker.patch("climg.terminal.os.get_terminal_size", return_value=os.terminal_size((120, 40)))
    assert query_terminal_size(1) == TerminalGeometry(columns=120, rows=40)


def test_query_failure_returns_none(mocker) -> None:
    mocker.patch("climg.terminal.os.get_terminal_size", side_effect=OSError("not a tty"))
    assert query_terminal_size(1) is None


def test_zero_size_returns_none(mocker) -> None:
    mocker.patch("climg.terminal.os.get_terminal_size", return_value=os.terminal_size((0, 0)))
    assert query_terminal_size(1) is None


def test_stdout_without_descriptor_returns_none(mocker) -> None:
    stdout = mocker.patch("climg.terminal.sys.stdout")
    stdout.fileno.side_effect = OSError("captured")
    assert query_terminal_size() is None


def test_geometry_validation() -> None:
    with pytest.raises(ValidationError):
        TerminalGeometry(columns=0, rows=10)
    with pytest.raises(ValidationError):
        TerminalGeometry(columns=10, rows=0)
