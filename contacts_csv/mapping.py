"""Input row -> contact-import row."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .rules import (
    IN_EMAIL_CREATED,
    IN_EMAIL_LOGIN,
    IN_FIRST_NAME,
    IN_GROUP_LAST_NAME,
    IN_PHONE,
    MIN_INPUT_FIELDS,
    NUM_OUTPUT_COLUMNS,
    OUT_EMAIL_1,
    OUT_EMAIL_2,
    OUT_FIRST_NAME,
    OUT_LABELS,
    OUT_LAST_NAME,
    OUT_PHONE_1,
)


class RowTooShort(ValueError):
    def __init__(self, found: int):
        super().__init__(f"{found} fields found, expected at least {MIN_INPUT_FIELDS}")
        self.found = found


def split_group_last_name(combined: str) -> Tuple[str, str]:
    """
    Split "GROUP LASTNAME" on the first space.

    The group loses trailing spaces, the last name loses leading spaces.
    Without any space the whole value is the last name.
    """
    if not combined:
        return "", ""

    head, sep, tail = combined.partition(" ")
    if not sep:
        return "", combined
    return head.rstrip(" "), tail.lstrip(" ")


def map_row(fields: Sequence[str], label: str) -> List[str]:
    """Build the 23-column output row for one parsed input row."""
    if len(fields) < MIN_INPUT_FIELDS:
        raise RowTooShort(len(fields))

    out = [""] * NUM_OUTPUT_COLUMNS

    out[OUT_FIRST_NAME] = fields[IN_FIRST_NAME]

    group, last_name = split_group_last_name(fields[IN_GROUP_LAST_NAME])
    out[OUT_LAST_NAME] = f"{group} {last_name}" if group else last_name

    out[OUT_LABELS] = label

    # E-mail 1 is the provisioned mailbox, E-mail 2 the login address.
    out[OUT_EMAIL_1] = fields[IN_EMAIL_CREATED]
    out[OUT_EMAIL_2] = fields[IN_EMAIL_LOGIN]

    out[OUT_PHONE_1] = fields[IN_PHONE]
    return out
