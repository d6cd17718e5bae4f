"""Helpers for reading and rewriting ``@import`` at-rule parameters."""

from __future__ import annotations

import re

from stylegraph.css.segment import segment

_SPECIFIER_RE = re.compile(r"""(['"])(.*?)\1""")


def import_specifier(params: str) -> str | None:
    """Return the quoted module specifier of an ``@import``, if any."""
    match = _SPECIFIER_RE.search(params)
    if not match:
        return None
    return match.group(2)


def import_layers(params: str) -> list[str]:
    """Return the names declared by ``layer(...)`` tokens in *params*."""
    layers: list[str] = []
    for part in segment(params, " "):
        part = part.strip()
        if not part.startswith("layer("):
            continue
        if not part.endswith(")"):
            continue
        name = part[6:-1].strip()
        if name:
            layers.append(name)
    return layers


def replace_specifier(params: str, specifier: str) -> str:
    """Swap the quoted specifier in *params* for *specifier*, keeping the quote style."""
    match = _SPECIFIER_RE.search(params)
    if not match:
        return params
    quote = match.group(1)
    return params[: match.start()] + f"{quote}{specifier}{quote}" + params[match.end():]


def plain_import_params(params: str) -> str:
    """Drop every modifier (layer, media, supports) and keep only the specifier."""
    parts = segment(params, " ")
    return parts[0].strip() if parts else params
