"""Diagnostic model: non-fatal findings reported while analyzing stylesheets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the stylesheet graph.

    Attributes:
        rule: Identifier of the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        file: The stylesheet involved, if applicable.
        specifier: The ``@import`` specifier involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    file: str | None = None
    specifier: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [{self.file}]" if self.file else ""
        return f"{self.severity.value}{location}: {self.message}"
