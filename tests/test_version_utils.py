from __future__ import annotations

from itertools import permutations

import pytest

from dropin_manager.utils.version_utils import compare_versions, is_newer, is_valid_version


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("0.2.0", "0.1.0", 1),
        ("0.1.0", "0.1.0", 0),
        ("1.0", "1.0.0", 0),
        ("1.10.0", "1.9.0", 1),
        ("2.0.0", "10.0.0", -1),
        ("1.0.0+build.5", "1.0.0", 0),
    ],
)
def test_compare_versions_numeric_core(left: str, right: str, expected: int) -> None:
    assert compare_versions(left, right) == expected
    assert compare_versions(right, left) == -expected


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("1.0.0-beta", "1.0.0", -1),
        ("1.0.0-1", "1.0.0", -1),
        ("1.0.0-post1", "1.0.0", -1),
        ("1.0.0-rev2", "1.0.0", -1),
        ("1.0.0-foo", "1.0.1-foo", -1),
        ("1.2-custom", "1.2.0-custom", 0),
        ("1.0.0-abc", "1.0.0-abd", -1),
        ("1.0.0-foo.2", "1.0.0-foo.10", -1),
        ("1.0.0-foo.1", "1.0.0-foo", 1),
        ("1.0.0-alpha.1", "1.0.0-alpha.beta", -1),
    ],
)
def test_compare_versions_qualifiers_rank_below_release(left: str, right: str, expected: int) -> None:
    assert compare_versions(left, right) == expected
    assert compare_versions(right, left) == -expected


def test_compare_versions_is_transitive() -> None:
    versions = ["1.0.0", "1.0.0-zzz", "1.0.0-post1", "1.0.0-1", "1.0.0-rc.1", "0.9.9", "1.0.1-alpha"]

    for a, b, c in permutations(versions, 3):
        if compare_versions(a, b) < 0 and compare_versions(b, c) < 0:
            assert compare_versions(a, c) < 0, (a, b, c)


def test_semver_precedence_chain() -> None:
    chain = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]

    for lower, higher in zip(chain, chain[1:]):
        assert compare_versions(lower, higher) == -1, (lower, higher)


def test_is_newer_treats_missing_reference_as_older() -> None:
    assert is_newer("0.0.1", None)
    assert is_newer("0.2.0", "0.1.9")
    assert is_newer("1.0.0", "1.0.0-1")
    assert not is_newer("0.1.0", "0.1.0")
    assert not is_newer("0.1.0", "0.2.0")


def test_is_valid_version() -> None:
    assert is_valid_version("1.2.3")
    assert is_valid_version("1.2.3-rc1")
    assert is_valid_version("1.2.3+build.7")
    assert not is_valid_version("latest")
    assert not is_valid_version("1.2.3 beta")
