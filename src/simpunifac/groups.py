"""Codec for compact ``"<id>:<count>"`` functional-group tokens."""

from __future__ import annotations

import math
import re

from simpunifac.errors import GroupTokenError
from simpunifac.models import FunctionalGroup, GroupToken

SEPARATOR = ":"
MAX_GROUP_ID = 255

_ID_PATTERN = re.compile(r"[0-9]+")
_COUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def decode_group(token: str) -> GroupToken:
    """Parse a token such as ``"14:1"`` into a :class:`GroupToken`.

    The id is a decimal integer in ``0..MAX_GROUP_ID``; the count is any finite
    real number. Integrality of the count is not enforced.
    """
    if not isinstance(token, str):
        raise GroupTokenError(f"Group token must be a string, got {token!r}", token=token)

    fields = token.split(SEPARATOR)
    if len(fields) != 2:
        raise GroupTokenError(
            f"Group token {token!r} must have the form '<id>{SEPARATOR}<count>'", token=token
        )
    id_text, count_text = fields

    if not _ID_PATTERN.fullmatch(id_text):
        raise GroupTokenError(f"Invalid group id {id_text!r} in token {token!r}", token=token)
    group_id = int(id_text)
    if group_id > MAX_GROUP_ID:
        raise GroupTokenError(
            f"Group id {group_id} in token {token!r} exceeds {MAX_GROUP_ID}", token=token
        )

    if not _COUNT_PATTERN.fullmatch(count_text):
        raise GroupTokenError(f"Invalid group count {count_text!r} in token {token!r}", token=token)
    count = float(count_text)
    if not math.isfinite(count):
        raise GroupTokenError(f"Group count in token {token!r} is not finite", token=token)

    return GroupToken(id=group_id, count=count, source=token)


def format_count(count: float) -> str:
    # 2.0 -> "2", 0.5 -> "0.5"
    count = float(count)
    if count.is_integer():
        return str(int(count))
    return repr(count)


def encode_group(group: GroupToken | FunctionalGroup) -> str:
    """Format a group back into its ``"<id>:<count>"`` token.

    A group decoded from text is written exactly as it was read.
    """
    if group.source is not None:
        return group.source
    return f"{group.id}{SEPARATOR}{format_count(group.count)}"
