"""Common test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from rich.console import Console

import escapade.console

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class DiagnosticsOutput:
    """Captured escapade diagnostics: verbose notes, warnings and errors.

    A test that expects diagnostics reads them with getvalue() and asserts
    on the text. A test that reads nothing gets checked for silence at
    teardown, so a stray warning fails it. Tests that do not care call
    ignore_output().

    Always assert on the result of getvalue(), reading it marks the output
    as checked.
    """

    _output: StringIO
    _checked: bool = field(default=False, init=False)

    def getvalue(self) -> str:
        """Get the diagnostics text, marking it as checked."""
        self._checked = True
        return self._output.getvalue()

    def ignore_output(self) -> None:
        """Accept any diagnostics without checking them."""
        self._checked = True

    def assert_silent_if_unchecked(self) -> None:
        """Fail if diagnostics were written but never read."""
        if not self._checked:
            output = self._output.getvalue()
            assert output == "", f"Unexpected diagnostics: {output!r}"


@pytest.fixture
def console_out() -> Iterator[DiagnosticsOutput]:
    """Send escapade diagnostics to a plain StringIO console.

    Verbose mode is off at the start and reset at the end.
    """
    escapade.console._verbose = False
    output = StringIO()
    test_console = Console(file=output, force_terminal=False, soft_wrap=True)
    fixture = DiagnosticsOutput(output)

    with patch("escapade.console._console", test_console):
        yield fixture

    escapade.console._verbose = False
    fixture.assert_silent_if_unchecked()
