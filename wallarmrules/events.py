"""Event subscriptions of notification integrations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

_EMAIL_EVENTS = (
    "vuln_high", "vuln_medium", "vuln_low", "system", "scope",
    "report_daily", "report_weekly", "report_monthly",
)
_OPSGENIE_EVENTS = ("vuln_high", "vuln_medium", "vuln_low", "siem")
_GENERIC_EVENTS = ("vuln_high", "vuln_medium", "vuln_low", "siem", "system", "scope")

_DEFAULT_EVENTS = {"email": _EMAIL_EVENTS, "opsgenie": _OPSGENIE_EVENTS}


@dataclass(frozen=True)
class IntegrationEvent:
    """An event type and whether the integration is subscribed to it."""

    event: str
    active: bool = False


def expand_integration_events(
    events: Iterable[Mapping[str, Any] | None], resource_type: str
) -> list[IntegrationEvent]:
    """Build the event list of an integration, using defaults when none is given."""
    configured = list(events)
    if not configured or configured[0] is None:
        names = _DEFAULT_EVENTS.get(resource_type, _GENERIC_EVENTS)
        return [IntegrationEvent(name, False) for name in names]

    result = []
    for conf in configured:
        event = conf.get("event_type", "")
        result.append(
            IntegrationEvent(
                event="siem" if event == "hit" else event,
                active=bool(conf.get("active", False)),
            )
        )
    return result