"""Single-line CSV tokenizing and field encoding.

Multi-line quoted fields are not supported: every physical line is one
record. The tokenizer is permissive and never raises on malformed quoting.
"""

from __future__ import annotations

from typing import Iterable, List

from .rules import OUTPUT_DELIMITER, OUTPUT_NEWLINE

QUOTE = '"'
_NEEDS_QUOTING = (",", '"', "\n")


def split_lines(text: str) -> List[str]:
    """Split LF-normalized text into lines without a phantom trailing line."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def parse_csv_line(line: str) -> List[str]:
    """
    Split one CSV line into fields.

    Rules:
    - `"` toggles quoted mode; `""` inside quoted mode is a literal quote.
    - `,` outside quoted mode ends a field.
    - An unterminated quote simply runs to the end of the line.
    - There is always at least one field, even for an empty line.
    """
    fields: List[str] = []
    buf: List[str] = []
    in_quotes = False
    i = 0
    n = len(line)

    while i < n:
        ch = line[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == QUOTE:
                buf.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
        i += 1

    fields.append("".join(buf))
    return fields


def format_csv_field(field: str) -> str:
    # quote only when required; unquoted output must stay byte-identical
    if any(c in field for c in _NEEDS_QUOTING):
        return QUOTE + field.replace(QUOTE, QUOTE * 2) + QUOTE
    return field


def format_csv_row(fields: Iterable[str]) -> str:
    return OUTPUT_DELIMITER.join(format_csv_field(f) for f in fields) + OUTPUT_NEWLINE
