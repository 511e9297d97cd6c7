"""Data models for validation issue descriptors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum


class Severity(IntEnum):
    """Issue severity, most severe first."""

    ERROR = 0
    WARNING = 1
    INFORMATION = 2
    HINT = 3

    @property
    def label(self) -> str:
        return ("Error", "Warning", "Information", "Hint")[self]


def _format_argument(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return "(" + ", ".join(str(item) for item in value) + ")"
    return str(value)


@dataclass(frozen=True)
class IssueType:
    """One category of validation issue.

    ``template`` uses positional ``{0}``, ``{1}`` ... placeholders.  When
    ``expects_array_argument`` is set, argument ``1`` must be a list and is
    rendered as ``(a, b, c)``.
    """

    code: str
    template: str
    severity: Severity = Severity.ERROR
    expects_array_argument: bool = False

    def message(self, args: Sequence[object]) -> str:
        """Render the message template with ``args``.

        Raises:
            TypeError: If the array expectation does not match ``args``.
            IndexError: If the template refers to a missing argument.
        """
        is_array = len(args) > 1 and isinstance(args[1], (list, tuple))
        if self.expects_array_argument and not is_array:
            raise TypeError(f"{self.code} expects a list as argument 1")
        if not self.expects_array_argument and is_array:
            raise TypeError(f"{self.code} expects a scalar as argument 1")
        return self.template.format(*(_format_argument(a) for a in args))


@dataclass(frozen=True)
class ErrorClass:
    """A named, explicitly-constructed group of issue descriptors."""

    name: str
    issues: tuple[IssueType, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        codes = [issue.code for issue in self.issues]
        duplicates = sorted({c for c in codes if codes.count(c) > 1})
        if duplicates:
            raise ValueError(f"Duplicate issue codes in {self.name}: {duplicates}")

    def __len__(self) -> int:
        return len(self.issues)

    def sorted_issues(self) -> list[IssueType]:
        """Descriptors ordered by code."""
        return sorted(self.issues, key=lambda issue: issue.code)
