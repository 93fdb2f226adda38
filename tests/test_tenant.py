import pytest

from wallarmrules.tenant import generate_vuln_prefix, remove_consecutive_duplicates


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("ABC", "ABC"),
        ("AABBCC", "ABC"),
        ("ABAB", "ABAB"),
        ("MSSSSPP", "MSP"),
        ("zzz", "z"),
    ],
)
def test_remove_consecutive_duplicates(text, expected):
    assert remove_consecutive_duplicates(text) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("acme", "ACME"),
        ("ab", "AB"),
        ("a-1", "A-1"),
        ("tf-test-abcdefghij", "TFTS"),
        ("Bookkeeper", "BKPR"),
        ("Mississippi", "MSP"),
        ("a1e2i3", "123"),
        ("aaaaaa", ""),
    ],
)
def test_generate_vuln_prefix(name, expected):
    assert generate_vuln_prefix(name) == expected