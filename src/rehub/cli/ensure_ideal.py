"""CLI error handling for non-ideal-state type narrowing.

Operations that can fail in expected ways return ``T | SomeError`` unions.
EnsureIdeal narrows those unions at the CLI boundary by reporting the error
and exiting, so command code only ever continues with the success type.
"""

from __future__ import annotations

from typing import TypeVar

import click

from rehub.non_ideal_state import NonIdealState
from rehub.output.output import user_output

T = TypeVar("T")


class EnsureIdeal:
    """Helper class for narrowing non-ideal-state discriminated unions."""

    @staticmethod
    def ideal_state(result: T | NonIdealState) -> T:
        """Ensure result is not a NonIdealState, otherwise exit with error.

        Args:
            result: Value that may be a NonIdealState

        Returns:
            The value unchanged if not NonIdealState (with narrowed type T)

        Raises:
            SystemExit: If result is NonIdealState (with exit code 1)
        """
        if isinstance(result, NonIdealState):
            user_output(click.style("Error: ", fg="red") + result.message)
            raise SystemExit(1)
        return result
