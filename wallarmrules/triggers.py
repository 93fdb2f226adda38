"""Triggers: filters, actions and thresholds as the triggers API expects them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterable, Mapping

THRESHOLD_TEMPLATES = frozenset(
    {
        "attacks_exceeded",
        "hits_exceeded",
        "incidents_exceeded",
        "vector_attack",
        "bruteforce_started",
    }
)

FOREVER_SECONDS = 315360000

_UNIT_SECONDS = {
    "Minutes": 60,
    "Hours": 60 * 60,
    "Days": 60 * 60 * 24,
    "Weeks": 60 * 60 * 24 * 7,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(value: Any) -> int:
    text = str(value)
    if not _INTEGER.fullmatch(text):
        raise ValueError(f'invalid integer "{text}"')
    return int(text)


@dataclass
class TriggerFilter:
    """A filter that narrows down the events a trigger reacts to."""

    id: str = ""
    operator: str = ""
    values: list[Any] | None = None


@dataclass
class TriggerAction:
    """An action a trigger performs once it fires."""

    id: str = ""
    integration_ids: list[int] | None = None
    lock_time: int = 0


@dataclass
class TriggerThreshold:
    """How many events within a period make a trigger fire."""

    period: int = 0
    operator: str = ""
    count: int = 0
    allowed_operators: list[str] = field(default_factory=lambda: ["gt"])


def check_threshold_required(template_id: str, threshold: Mapping[str, Any] | None) -> None:
    """Raise ValueError when the template needs a threshold and none is given."""
    if template_id in THRESHOLD_TEMPLATES and not threshold:
        raise ValueError(f'"threshold" must be presented with the "{template_id}" template')


def _add_months(moment: datetime, months: int) -> datetime:
    years, month_index = divmod(moment.month - 1 + months, 12)
    first = moment.replace(year=moment.year + years, month=month_index + 1, day=1)
    return first + timedelta(days=moment.day - 1)


def lock_time_seconds(lock_time: int, unit: str | None, now: datetime | None = None) -> int:
    """Convert a lock time in the given unit to seconds; zero means forever."""
    if unit == "Months":
        moment = now if now is not None else datetime.now()
        seconds = int((_add_months(moment, lock_time) - moment).total_seconds())
    else:
        seconds = lock_time * _UNIT_SECONDS.get(unit or "", 1)
    return seconds or FOREVER_SECONDS


def _filter_values(filter_id: Any, values: list[Any]) -> list[Any]:
    if filter_id in ("pool", "api_spec_ids"):
        return [_atoi(v) for v in values]
    if filter_id == "response_status":
        return [v if str(v)[-2:] == "xx" else _atoi(v) for v in values]
    return values


def expand_filters(filters: Iterable[Mapping[str, Any] | None]) -> list[TriggerFilter]:
    """Turn configured filter blocks into trigger filters."""
    configured = list(filters)
    if not configured or configured[0] is None:
        return []
    result = []
    for conf in configured:
        item = TriggerFilter()
        filter_id = conf.get("filter_id")
        if "filter_id" in conf:
            item.id = filter_id
        if "operator" in conf:
            item.operator = conf["operator"]
        if "value" in conf:
            item.values = _filter_values(filter_id, list(conf["value"] or []))
        result.append(item)
    return result


def expand_actions(
    actions: Iterable[Mapping[str, Any] | None], now: datetime | None = None
) -> list[TriggerAction]:
    """Turn configured action blocks into trigger actions."""
    configured = list(actions)
    if not configured or configured[0] is None:
        return []
    result = []
    for conf in configured:
        item = TriggerAction()
        if "action_id" in conf:
            item.id = conf["action_id"]
        if "integration_id" in conf:
            item.integration_ids = [int(i) for i in conf["integration_id"] or []]
        if "lock_time" in conf:
            item.lock_time = lock_time_seconds(
                int(conf["lock_time"] or 0), conf.get("lock_time_format"), now
            )
        result.append(item)
    return result


def expand_threshold(threshold: Mapping[str, Any]) -> TriggerThreshold:
    """Turn a configured threshold map into a trigger threshold."""
    result = TriggerThreshold()
    if "period" in threshold:
        result.period = _atoi(threshold["period"])
    if threshold.get("time_format") == "Minutes":
        result.period *= 60
    if "operator" in threshold:
        result.operator = threshold["operator"]
    if "count" in threshold:
        result.count = _atoi(threshold["count"])
    return result