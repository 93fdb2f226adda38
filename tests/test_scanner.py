import pytest

from wallarmrules.scanner import (
    ScannerPlan,
    collect_resources,
    is_ip_address,
    merge_resources,
    plan_update,
    resource_type,
    scanner_resource_id,
    split_deletions,
)

ELEMENTS = ["1.1.1.1", "example.com", "2.2.2.2/31"]
ELEMENTS2 = ["5.5.5.5", "example2.com", "4.4.4.4/30"]
ELEMENTS3 = ["6.6.6.6", "example3.com", "8.8.8.8/32"]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1.1.1.1", True),
        ("::1", True),
        ("example.com", False),
        ("2.2.2.2/31", False),
        ("8.8.8.8/32", False),
        ("", False),
    ],
)
def test_is_ip_address(value, expected):
    assert is_ip_address(value) is expected


def test_resource_types_of_source_elements():
    assert [resource_type(e) for e in ELEMENTS] == ["ip", "domain", "domain"]


def test_collect_resources_uses_ip_or_domain():
    objects = [
        {"ip": "1.1.1.1", "domain": "", "id": 10},
        {"ip": "", "domain": "example.com", "id": 11},
    ]
    assert collect_resources(objects) == {"1.1.1.1": 10, "example.com": 11}


def test_plan_update_replaces_all():
    state = dict(zip(ELEMENTS, [1, 2, 3]))
    plan = plan_update(ELEMENTS2, state)
    assert plan == ScannerPlan(add=sorted(ELEMENTS2), delete=sorted(ELEMENTS))


def test_plan_update_no_change():
    state = dict(zip(ELEMENTS3, [1, 2, 3]))
    plan = plan_update(ELEMENTS3, state)
    assert plan.add == [] and plan.delete == []


def test_plan_update_partial():
    state = {"1.1.1.1": 1, "example.com": 2}
    plan = plan_update(["example.com", "5.5.5.5"], state)
    assert plan.add == ["5.5.5.5"]
    assert plan.delete == ["1.1.1.1"]


def test_split_deletions():
    state = dict(zip(ELEMENTS, [1, 2, 3]))
    assert split_deletions(state, ELEMENTS) == ([1], [2, 3])


def test_split_deletions_missing_element():
    with pytest.raises(KeyError):
        split_deletions({}, ["1.1.1.1"])


def test_merge_resources():
    merged = merge_resources({"a.com": 1}, {"1.1.1.1": 2, "a.com": 3})
    assert merged == {"a.com": 3, "1.1.1.1": 2}


def test_scanner_resource_id():
    assert scanner_resource_id(1, ELEMENTS) == "1/[1.1.1.1 example.com 2.2.2.2/31]"