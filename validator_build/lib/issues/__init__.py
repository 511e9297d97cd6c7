"""Validation issue descriptors and the ISSUES.md catalog renderer."""

from validator_build.lib.issues.catalog import (
    ARRAY_ARGS,
    SCALAR_ARGS,
    Catalog,
    example_message,
    render_catalog,
)
from validator_build.lib.issues.models import ErrorClass, IssueType, Severity
from validator_build.lib.issues.registry import ERROR_CLASSES, all_issue_types

__all__ = [
    "ARRAY_ARGS",
    "SCALAR_ARGS",
    "Catalog",
    "example_message",
    "render_catalog",
    "ErrorClass",
    "IssueType",
    "Severity",
    "ERROR_CLASSES",
    "all_issue_types",
]
