import pytest

from wallarmrules.hints import (
    HintRule,
    HintType,
    flatten_points,
    hint_create_payload,
    hint_read_query,
    match_rules,
)
from wallarmrules.points import ActionDetails, expand_action_conditions


def _header_condition():
    return expand_action_conditions(
        [{"type": "iequal", "value": "vpatch.wallarm.com", "point": {"header": "HOST"}}]
    )


def test_vpatch_basic_payload():
    payload = hint_create_payload(
        "vpatch", 42, _header_condition(), [["get_all"]], "", "xss"
    )
    assert payload["attack_type"] == "xss"
    assert len(payload["action"]) == 1
    assert payload["action"][0] == {
        "type": "iequal",
        "point": ["header", "HOST"],
        "value": "vpatch.wallarm.com",
    }
    assert payload["point"][0][0] == "get_all"
    assert payload["type"] == "vpatch"
    assert payload["variativity_disabled"] is True
    assert payload["validated"] is False


def test_vpatch_default_branch_payload():
    payload = hint_create_payload("vpatch", 42, [], [["get", "query"]], "", "crlf")
    assert payload["attack_type"] == "crlf"
    assert payload["point"] == [["get", "query"]]
    assert payload["action"] == []


def test_vpatch_requires_attack_type():
    with pytest.raises(ValueError):
        hint_create_payload("vpatch", 1, [], [["get_all"]])


def test_variative_payload_has_no_attack_type():
    payload = hint_create_payload(HintType.VARIATIVE_VALUES, 3, [], [["path", "99"]])
    assert "attack_type" not in payload
    assert payload["point"] == [["path", 99.0]]
    assert payload["type"] == "variative_values"


def test_unknown_hint_type_rejected():
    with pytest.raises(ValueError):
        hint_read_query("wrong_type", 1, 2)


def test_hint_read_query():
    query = hint_read_query(HintType.VPATCH, 7, 99)
    assert query["filter"] == {"clientid": [7], "id": [99], "type": ["vpatch"]}
    assert query["limit"] == 1000
    assert query["order_by"] == "updated_at"
    assert query["order_desc"] is True


def test_flatten_points():
    assert flatten_points([["get", "query"], ["get_all"]]) == ["get", "query", "get_all"]
    assert flatten_points([]) == []


def test_match_same_id():
    hints = [HintRule(id=5, action_id=10, type="vpatch", point=["get_all"])]
    assert match_rules("vpatch", 10, 5, [["get_all"]], [], hints) == (5, [])


def test_match_by_structure():
    hints = [HintRule(id=7, action_id=10, type="vpatch", point=["path", 0.0])]
    assert match_rules("vpatch", 10, 5, [["path", "0"]], [], hints) == (7, [])


def test_mismatch_reports_ids():
    hints = [
        HintRule(id=7, action_id=10, type="vpatch", point=["get", "other"]),
        HintRule(id=8, action_id=11, type="vpatch", point=["get", "query"]),
    ]
    assert match_rules("vpatch", 10, 5, [["get", "query"]], [], hints) == (0, [7, 8])


def test_mismatched_conditions():
    hints = [
        HintRule(
            id=7,
            action_id=10,
            type="vpatch",
            point=["get_all"],
            action=[ActionDetails("iequal", ["header", "HOST"], "other.example.com")],
        )
    ]
    matched, missing = match_rules("vpatch", 10, 5, [["get_all"]], _header_condition(), hints)
    assert matched == 0
    assert missing == [7]


def test_matching_conditions():
    hints = [
        HintRule(
            id=7,
            action_id=10,
            type="vpatch",
            point=["get_all"],
            action=[ActionDetails("iequal", ["header", "HOST"], "vpatch.wallarm.com")],
        )
    ]
    assert match_rules("vpatch", 10, 5, [["get_all"]], _header_condition(), hints) == (7, [])


def test_absent_condition_value_is_ignored():
    conditions = [ActionDetails("absent", ["header", "X-TEST"], "leftover")]
    hints = [
        HintRule(
            id=9,
            action_id=3,
            type="variative_keys",
            point=["post"],
            action=[ActionDetails("absent", ["header", "X-TEST"], None)],
        )
    ]
    assert match_rules("variative_keys", 3, 1, [["post"]], conditions, hints) == (9, [])


def test_wrong_type_does_not_match():
    hints = [HintRule(id=7, action_id=10, type="variative_keys", point=["get_all"])]
    assert match_rules("vpatch", 10, 5, [["get_all"]], [], hints) == (0, [7])