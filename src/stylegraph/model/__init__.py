"""Stylegraph model layer -- public type re-exports."""

from stylegraph.model.diagnostic import Diagnostic, Severity
from stylegraph.model.registry import StylesheetRegistry
from stylegraph.model.stylesheet import Stylesheet

__all__ = [
    "Stylesheet",
    "StylesheetRegistry",
    "Severity",
    "Diagnostic",
]
