"""Hint-based rules: virtual patches and variative keys and values."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from itertools import chain
from typing import Any, Iterable, Sequence

from .points import (
    ActionDetails,
    align_point_scheme,
    equal_without_order,
    expand_points,
    fill_in_default_values,
)

logger = logging.getLogger(__name__)

READ_LIMIT = 1000


class HintType(str, Enum):
    """Kinds of rules managed as hints."""

    VPATCH = "vpatch"
    VARIATIVE_KEYS = "variative_keys"
    VARIATIVE_VALUES = "variative_values"


@dataclass
class HintRule:
    """A rule as returned by the hints API."""

    id: int
    action_id: int
    type: str
    point: list[Any] = field(default_factory=list)
    action: list[ActionDetails] = field(default_factory=list)
    attack_type: str = ""


def flatten_points(points: Iterable[Sequence[Any]]) -> list[Any]:
    """Join nested configured points into one flat point."""
    return list(chain.from_iterable(points))


def match_rules(
    hint_type: HintType | str,
    action_id: int,
    rule_id: int,
    points: Iterable[Sequence[Any]],
    conditions: Iterable[ActionDetails],
    hints: Iterable[HintRule],
) -> tuple[int, list[int]]:
    """Find the rule in the API response that matches the configured one.

    Returns the ID of the matching rule, or 0 when none matches, and the IDs
    of the rules that did not match.
    """
    kind = HintType(hint_type).value
    expected = (action_id, kind, flatten_points(points))
    wanted = fill_in_default_values(conditions)

    matched = 0
    not_found: list[int] = []
    for rule in hints:
        if rule.id == rule_id:
            matched = rule.id
            continue
        actual = (rule.action_id, rule.type, align_point_scheme(rule.point))
        if actual == expected and equal_without_order(wanted, list(rule.action)):
            matched = rule.id
            continue
        not_found.append(rule.id)

    if matched == 0:
        logger.warning(
            "these rule IDs: %s have been found under the action ID: %d, "
            "but none of them is in the plan",
            not_found,
            action_id,
        )
    return matched, not_found


def hint_read_query(hint_type: HintType | str, client_id: int, rule_id: int) -> dict[str, Any]:
    """Build the query that reads one rule of the given type."""
    kind = HintType(hint_type).value
    return {
        "limit": READ_LIMIT,
        "offset": 0,
        "order_by": "updated_at",
        "order_desc": True,
        "filter": {
            "clientid": [client_id],
            "id": [rule_id],
            "type": [kind],
        },
    }


def _condition_payload(details: ActionDetails) -> dict[str, Any]:
    payload: dict[str, Any] = {"type": details.type}
    if details.point:
        payload["point"] = list(details.point)
    if details.value is not None:
        payload["value"] = details.value
    return payload


def hint_create_payload(
    hint_type: HintType | str,
    client_id: int,
    conditions: Iterable[ActionDetails],
    points: Iterable[Sequence[Any]],
    comment: str = "",
    attack_type: str | None = None,
) -> dict[str, Any]:
    """Build the request body that creates a rule of the given type."""
    kind = HintType(hint_type)
    payload: dict[str, Any] = {
        "type": kind.value,
        "clientid": client_id,
        "action": [_condition_payload(c) for c in conditions],
        "point": expand_points(points),
        "validated": False,
        "comment": comment,
        "variativity_disabled": True,
    }
    if kind is HintType.VPATCH:
        if not attack_type:
            raise ValueError('"attack_type" is required for the "vpatch" rule')
        payload["attack_type"] = attack_type
    return payload