"""Scanner scope elements: IP addresses and domains."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from .points import diff_strings


@dataclass
class ScannerPlan:
    """Elements to add to and delete from the scanner scope."""

    add: list[str] = field(default_factory=list)
    delete: list[str] = field(default_factory=list)


def is_ip_address(value: str) -> bool:
    """Tell whether a string is a single IPv4 or IPv6 address."""
    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def resource_type(element: str) -> str:
    """Return the scanner resource type of an element: 'ip' or 'domain'."""
    return "ip" if is_ip_address(element) else "domain"


def collect_resources(objects: Iterable[Mapping[str, Any]]) -> dict[str, int]:
    """Map the IP or domain of each created scanner object to its ID."""
    resources: dict[str, int] = {}
    for obj in objects:
        ip = obj.get("ip") or ""
        key = ip if is_ip_address(ip) else obj.get("domain") or ""
        resources[key] = obj["id"]
    return resources


def plan_update(elements: Iterable[str], resource_ids: Mapping[str, int]) -> ScannerPlan:
    """Compare configured elements with those in the state."""
    wanted = sorted(elements)
    existing = sorted(resource_ids)
    return ScannerPlan(
        add=diff_strings(wanted, existing),
        delete=diff_strings(existing, wanted),
    )


def split_deletions(
    resource_ids: Mapping[str, int], elements: Iterable[str]
) -> tuple[list[int], list[int]]:
    """Split the IDs of elements to delete into IP IDs and domain IDs."""
    ip_ids: list[int] = []
    domain_ids: list[int] = []
    for element in elements:
        target = ip_ids if is_ip_address(element) else domain_ids
        target.append(resource_ids[element])
    return ip_ids, domain_ids


def merge_resources(kept: Mapping[str, int], added: Mapping[str, int]) -> dict[str, int]:
    """Combine kept and newly added resources; added ones win on conflicts."""
    return {**kept, **added}


def scanner_resource_id(client_id: int, elements: Sequence[str]) -> str:
    """Return the resource ID of a scanner scope."""
    return f"{client_id}/[{' '.join(elements)}]"