"""Resource IDs of rules and the choice of how to delete them."""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_import_id(resource_id: str) -> tuple[int, int, int]:
    """Split an ID of the form clientID/actionID/ruleID into its numbers."""
    parts = resource_id.split("/", 2)
    if len(parts) != 3:
        raise ValueError(
            f'invalid id ("{resource_id}") specified, '
            'should be in format "{clientID}/{actionID}/{ruleID}"'
        )
    for part in parts:
        if not _INTEGER.fullmatch(part):
            raise ValueError(f'invalid integer "{part}" in id "{resource_id}"')
    client_id, action_id, rule_id = (int(part) for part in parts)
    return client_id, action_id, rule_id


def format_resource_id(client_id: int, action_id: int, rule_id: int) -> str:
    """Build the resource ID of a rule."""
    return f"{client_id}/{action_id}/{rule_id}"


def is_last_hint(rules: Sequence[Mapping[str, Any]]) -> bool:
    """Tell whether the action holds only this one rule, so the whole action goes."""
    return (
        len(rules) == 1
        and rules[0].get("hints") == 1
        and rules[0].get("grouped_hints_count") == 1
    )