"""Markdown rendering of the issue catalog (ISSUES.md)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from validator_build.lib.issues.models import ErrorClass, IssueType

CATALOG_TITLE = "# glTF 2.0 Validation Issues"
TABLE_HEADER = "| Code | Message | Severity |"
TABLE_SEPARATOR = "|------|---------|----------|"

SCALAR_ARGS: tuple[object, ...] = ("`%1`", "`%2`", "`%3`", "`%4`")
ARRAY_ARGS: tuple[object, ...] = ("`%1`", ["`%a`", "`%b`", "`%c`"], "`%3`", "`%4`")


@dataclass(frozen=True)
class Catalog:
    """A rendered catalog and its per-class descriptor counts."""

    markdown: str
    counts: dict[str, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def example_message(issue: IssueType) -> str:
    """Render an issue's message with placeholder arguments."""
    return issue.message(ARRAY_ARGS if issue.expects_array_argument else SCALAR_ARGS)


def render_row(issue: IssueType) -> str:
    return f"|{issue.code}|{example_message(issue)}|{issue.severity.label}|"


def render_section(error_class: ErrorClass) -> list[str]:
    lines = [f"## {error_class.name}", TABLE_HEADER, TABLE_SEPARATOR]
    lines.extend(render_row(issue) for issue in error_class.sorted_issues())
    return lines


def render_catalog(error_classes: Iterable[ErrorClass]) -> Catalog:
    """Build the full Markdown catalog.

    Rendering errors from malformed templates propagate to the caller.
    """
    lines = [CATALOG_TITLE]
    counts: dict[str, int] = {}
    for error_class in error_classes:
        lines.extend(render_section(error_class))
        counts[error_class.name] = len(error_class)
    return Catalog(markdown="\n".join(lines) + "\n", counts=counts)
