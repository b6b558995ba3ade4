"""Static font tables for each supported game text version."""

from __future__ import annotations

from .jak1 import JAK1_ENCODE_RULES, JAK1_PASSTHROUGH, JAK1_REPLACE_RULES
from .jak1_v2 import JAK1_V2_ENCODE_RULES
from .jak2 import JAK2_ENCODE_RULES, JAK2_PASSTHROUGH, JAK2_REPLACE_RULES

__all__ = [
    "JAK1_ENCODE_RULES",
    "JAK1_PASSTHROUGH",
    "JAK1_REPLACE_RULES",
    "JAK1_V2_ENCODE_RULES",
    "JAK2_ENCODE_RULES",
    "JAK2_PASSTHROUGH",
    "JAK2_REPLACE_RULES",
]
