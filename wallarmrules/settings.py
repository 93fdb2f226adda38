"""Client-wide rules settings: validation and API payloads."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping

from .validation import validate_in, validate_range

MAX_INT32 = 2**31 - 1

_CHECKS: dict[str, Callable[[str, Any], Any]] = {
    "client_id": lambda k, v: validate_range(k, v, 1, MAX_INT32),
    "min_lom_format": lambda k, v: validate_range(k, v, 1, MAX_INT32),
    "max_lom_format": lambda k, v: validate_range(k, v, 1, MAX_INT32),
    "max_lom_size": lambda k, v: validate_range(k, v, 1025),
    "lom_compilation_delay": lambda k, v: validate_range(k, v, 0, MAX_INT32),
    "rules_snapshot_max_count": lambda k, v: validate_range(k, v, 0, 99),
    "parameters_count_weight": lambda k, v: validate_range(k, v, 0, 10),
    "path_variativity_weight": lambda k, v: validate_range(k, v, 0, 10),
    "pii_weight": lambda k, v: validate_range(k, v, 0, 10),
    "request_content_weight": lambda k, v: validate_range(k, v, 0, 10),
    "open_vulns_weight": lambda k, v: validate_range(k, v, 0, 10),
    "serialized_data_weight": lambda k, v: validate_range(k, v, 0, 10),
    "risk_score_algo": lambda k, v: validate_in(k, v, ("maximum", "average"), False),
}


@dataclass
class RulesSettings:
    """Rules settings of one client; None marks a setting that is not configured."""

    client_id: int | None = None
    min_lom_format: int | None = None
    max_lom_format: int | None = None
    max_lom_size: int | None = None
    lom_disabled: bool | None = None
    lom_compilation_delay: int | None = None
    rules_snapshot_enabled: bool | None = None
    rules_snapshot_max_count: int | None = None
    rules_manipulation_locked: bool | None = None
    heavy_lom: bool | None = None
    parameters_count_weight: int | None = None
    path_variativity_weight: int | None = None
    pii_weight: int | None = None
    request_content_weight: int | None = None
    open_vulns_weight: int | None = None
    serialized_data_weight: int | None = None
    risk_score_algo: str | None = None

    def validate(self) -> RulesSettings:
        """Check every configured setting against its allowed range."""
        for name, check in _CHECKS.items():
            value = getattr(self, name)
            if value is not None:
                check(name, value)
        return self

    def to_params(self) -> dict[str, Any]:
        """Build the update payload; unset and zero-valued settings are left out."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "client_id" and getattr(self, f.name)
        }

    @classmethod
    def from_api(cls, body: Mapping[str, Any]) -> RulesSettings:
        """Build settings from an API response body."""
        return cls(**{f.name: body.get(f.name) for f in fields(cls) if f.name in body})


def settings_resource_id(client_id: int) -> str:
    """Return the resource ID of a client's rules settings."""
    return f"{client_id}/rules_settings"