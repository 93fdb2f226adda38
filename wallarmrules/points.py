"""Request points and action conditions as the rules API understands them."""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

NUMERIC_POINTS = frozenset(
    {
        "path",
        "array",
        "grpc",
        "json_array",
        "xml_comment",
        "xml_dtd_entity",
        "xml_pi",
        "xml_tag_array",
    }
)

PAIRED_POINTS = frozenset(
    {
        "json_array", "xml_pi", "hash", "array", "viewstate_array", "viewstate_pair",
        "viewstate_triplet", "viewstate_dict", "header", "xml_dtd_entity",
        "xml_tag_array", "xml_tag", "xml_attr", "xml_comment", "grpc", "protobuf",
        "json_obj", "json", "jwt", "multipart", "get", "content_disp",
        "form_urlencoded", "path", "cookie", "response_header",
        "viewstate_sparse_array",
    }
)

_VALUE_POINTS = frozenset({"action_name", "action_ext", "method", "proto", "scheme", "uri"})


@dataclass
class ActionDetails:
    """One condition of a rule's action scope."""

    type: str = ""
    point: list[Any] = field(default_factory=list)
    value: Any = None


def _go_format(value: Any) -> str:
    """Format a value the way the API's textual point representation expects."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_go_format(item) for item in value) + "]"
    if isinstance(value, Mapping):
        return "map[" + " ".join(f"{key}:{_go_format(value[key])}" for key in sorted(value)) + "]"
    return str(value)


def expand_points(points: Iterable[Sequence[Any]]) -> list[list[Any]]:
    """Convert configured points, turning indexes of numeric points into floats."""
    result = []
    for point in points:
        item = list(point)
        if item and item[0] in NUMERIC_POINTS and len(item) > 1:
            try:
                item[1] = float(item[1])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"invalid index {item[1]!r} for point {item[0]!r}") from exc
        result.append(item)
    return result


def wrap_point_elements(items: Sequence[Any]) -> list[list[str]]:
    """Group a flat API point into the nested list form used in configuration."""
    result: list[list[str]] = []
    position = 0
    while position < len(items):
        element = items[position]
        if element in PAIRED_POINTS and position + 1 < len(items):
            result.append([_go_format(element), _go_format(items[position + 1])])
            position += 2
        else:
            result.append([_go_format(element)])
            position += 1
    return result


def align_point_scheme(rule_point: Sequence[Any]) -> list[Any]:
    """Render numeric indexes of an API point as strings to match configuration."""
    aligned: list[Any] = []
    previous: Any = None
    for position, element in enumerate(rule_point):
        if position > 0 and previous in NUMERIC_POINTS:
            aligned.append(str(int(element)))
        else:
            aligned.append(element)
        previous = element
    return aligned


def _apply_point(details: ActionDetails, name: str, value: Any, kind: Any) -> None:
    if name == "path":
        try:
            details.point = [name, float(value)]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid path index {value!r}") from exc
    elif name in _VALUE_POINTS:
        details.point = [name]
        if kind == "iequal":
            details.value = str(value).lower()
        elif kind == "absent":
            details.value = None
        else:
            details.value = str(value)
    elif name == "instance":
        details.point = [name]
        details.value = str(value)
        details.type = "equal"
    elif name == "header":
        details.point = [name, str(value).upper()]
    elif name == "query":
        text = str(value)
        details.point = ["get", text.lower() if kind == "iequal" else text]
    else:
        text = str(value)
        details.point = [name, text.lower() if kind == "iequal" else text]


def expand_action_conditions(actions: Iterable[Mapping[str, Any]]) -> list[ActionDetails]:
    """Turn configured action blocks into API conditions, dropping empty ones."""
    result = []
    for action in actions:
        kind = action.get("type")
        details = ActionDetails()
        for key in sorted(action):
            raw = action[key]
            if key == "point":
                for name, value in (raw or {}).items():
                    _apply_point(details, name, value, kind)
            elif key == "type":
                if raw:
                    details.type = raw
            elif key == "value":
                if raw:
                    details.value = raw.lower() if kind == "iequal" else raw
        if details.type:
            result.append(details)
    return result


def action_details_to_map(details: ActionDetails) -> dict[str, Any]:
    """Represent a condition as a plain mapping, with an empty value as ''."""
    mapping: dict[str, Any] = {"type": details.type}
    if details.point:
        mapping["point"] = list(details.point)
    mapping["value"] = "" if details.value in (None, "") else details.value
    return mapping


def _schema_point(mapping: Mapping[str, Any]) -> Any:
    point = mapping["point"]
    name = point[0]
    if name in _VALUE_POINTS or name == "instance":
        return {name: mapping["value"]}
    if name == "path":
        return {"path": str(int(point[1]))}
    if name == "header":
        return {"header": point[1]}
    if name == "get":
        return {"query": point[1]}
    return point


def hash_action_map(mapping: Mapping[str, Any]) -> int:
    """Hash a condition mapping so equal conditions fall into one set slot."""
    text = f"{mapping['type']}-{mapping['value']}-"
    if "point" in mapping:
        text += f"{_go_format(_schema_point(mapping))}-"
    return zlib.crc32(text.encode())


def fill_in_default_values(actions: Iterable[ActionDetails]) -> list[ActionDetails]:
    """Return copies of the conditions with values of 'absent' ones cleared."""
    return [
        ActionDetails(a.type, list(a.point), None if a.type == "absent" else a.value)
        for a in actions
    ]


def _point_key(details: ActionDetails) -> str:
    return "/".join(_go_format(element) for element in details.point)


def equal_without_order(first: Sequence[ActionDetails], second: Sequence[ActionDetails]) -> bool:
    """Tell whether two lists hold the same conditions in any order."""
    if len(first) != len(second):
        return False
    return all(
        compare_action_details(a, b)
        for a, b in zip(sorted(first, key=_point_key), sorted(second, key=_point_key))
    )


def compare_action_details(first: ActionDetails, second: ActionDetails) -> bool:
    """Tell whether two conditions match by type, point and value."""
    return (
        first.type == second.type
        and action_points_equal(first.point, second.point)
        and first.value == second.value
    )


def action_points_equal(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Tell whether two points hold the same elements, counted with multiplicity."""
    if len(first) != len(second):
        return False
    remaining = list(second)
    for element in first:
        for position, candidate in enumerate(remaining):
            if element == candidate:
                del remaining[position]
                break
        else:
            return False
    return True


def diff_strings(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """Return the items of the first sequence that are absent from the second."""
    excluded = set(second)
    return [item for item in first if item not in excluded]