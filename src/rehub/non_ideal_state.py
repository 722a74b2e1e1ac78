"""Protocol shared by result types that describe an expected failure.

Operations that can fail in ways the user should hear about return
``Success | SomethingError`` unions instead of raising. Every error member
carries a human message and a stable machine-readable ``error_type``.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NonIdealState(Protocol):
    """An expected, reportable failure outcome."""

    @property
    def message(self) -> str: ...

    @property
    def error_type(self) -> str: ...
