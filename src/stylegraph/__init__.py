"""Stylegraph - split layered utilities out of CSS import graphs."""

__version__ = "0.1.0"

from stylegraph.analysis import analyze  # noqa: E402
from stylegraph.config import UpgradeConfig  # noqa: E402
from stylegraph.migrate import MigrationReport, migrate, migrate_contents, run  # noqa: E402
from stylegraph.model import Stylesheet, StylesheetRegistry  # noqa: E402
from stylegraph.split import SplitResult, split  # noqa: E402

__all__ = [
    "__version__",
    "UpgradeConfig",
    "Stylesheet",
    "StylesheetRegistry",
    "analyze",
    "split",
    "SplitResult",
    "migrate",
    "migrate_contents",
    "run",
    "MigrationReport",
]
