from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UpgradeConfig:
    split_layers: tuple[str, ...] = ("utilities", "components")
    utility_at_rule: str = "utility"
    derived_suffix: str = ".utilities"  # a.css -> a.utilities.css
    extensions: tuple[str, ...] = (".css",)
    main_fields: tuple[str, ...] = ("style",)
    cwd: str | None = None  # defaults to os.getcwd()
