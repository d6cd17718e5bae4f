"""Split a string on a separator, ignoring separators inside nested groups."""

from __future__ import annotations

_OPEN = {"(": ")", "[": "]", "{": "}"}
_QUOTES = {'"', "'"}


def segment(text: str, separator: str) -> list[str]:
    """Split *text* on *separator* at the top level only.

    Separators inside parentheses, brackets, braces, or quoted strings are
    kept.  Unbalanced input never raises; an unclosed group simply swallows
    the rest of the string.  Empty parts from repeated separators are dropped
    when the separator is whitespace.

    >>> segment('"./a.css" layer(utilities) supports(display: grid)', " ")
    ['"./a.css"', 'layer(utilities)', 'supports(display: grid)']
    """
    parts: list[str] = []
    stack: list[str] = []
    quote: str | None = None
    start = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if quote is not None:
            if char == quote:
                quote = None
        elif char in _QUOTES:
            quote = char
        elif char in _OPEN:
            stack.append(_OPEN[char])
        elif stack and char == stack[-1]:
            stack.pop()
        elif not stack and text.startswith(separator, i):
            parts.append(text[start:i])
            i += len(separator)
            start = i
            continue
        i += 1
    parts.append(text[start:])

    if separator.isspace():
        return [part for part in parts if part.strip()]
    return parts
