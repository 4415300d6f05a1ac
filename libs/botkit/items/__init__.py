"""Item requirements — charge- and note-aware inventory checks."""

from botkit.items.models import HeldItem, RequiredItem
from botkit.items.names import base_name, match_key, parse_charge
from botkit.items.requirements import ItemRequirement, compute_missing, format_report

__all__ = [
    "HeldItem",
    "ItemRequirement",
    "RequiredItem",
    "base_name",
    "compute_missing",
    "format_report",
    "match_key",
    "parse_charge",
]
