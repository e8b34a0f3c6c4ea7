"""Base model shared by the data model classes.

Measures and Areas are mutable containers populated incrementally during
import, so unlike immutable response models they are not frozen.  Only the
identifying key of each entity (``Measure.codename``, ``Area.code``) is
frozen at field level.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from pybethyw.exceptions import BethYwValueParseError


def dump_json(data: dict[str, Any], *, indent: int | None = None) -> str:
    """Serialize *data*, guaranteeing ``{}`` for empty mappings.

    Non-finite readings have no JSON representation and raise
    :class:`BethYwValueParseError`.
    """
    if not data:
        return "{}"
    try:
        return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        raise BethYwValueParseError(f"Cannot serialize non-finite reading: {exc}") from exc


class BethYwBaseModel(BaseModel):
    """Base for the Area/Measure data model."""

    model_config = ConfigDict(extra="forbid")
