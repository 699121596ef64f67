from __future__ import annotations

from whitelistctl.checks import CHECKS, check_bad_data, check_ids, check_ordering, expected_order, run_checks
from whitelistctl.core.model import Finding, FindingKind
from whitelistctl.core.policy import BAD_DATA_MARKER, MarkerPolicy


def test_registry_order_is_bad_data_then_ordering() -> None:
    assert check_ids() == ["whitelist/bad-data", "whitelist/ordering"]
    assert all(chk.description for chk in CHECKS)


def test_marker_policy_default_and_case() -> None:
    policy = MarkerPolicy()
    assert policy.marker == BAD_DATA_MARKER
    assert policy.matches("BAD entry")
    assert policy.matches("bAdly")
    assert not policy.matches(" bad")
    assert MarkerPolicy("Deny").matches("deny-all")


def test_check_bad_data_positions_are_one_based() -> None:
    assert check_bad_data(["ok", "bad-one", "Bad two"]) == [
        Finding(FindingKind.BAD_DATA, 2, "bad-one"),
        Finding(FindingKind.BAD_DATA, 3, "Bad two"),
    ]


def test_expected_order_is_case_insensitive_and_stable() -> None:
    assert expected_order(["b", "B", "a", "A"]) == ["a", "A", "b", "B"]


def test_check_ordering_reports_expected_values() -> None:
    assert check_ordering(["b", "a"]) == [
        Finding(FindingKind.UNORDERED, 1, "a"),
        Finding(FindingKind.UNORDERED, 2, "b"),
    ]
    assert check_ordering(["a", "B", "c"]) == []


def test_run_checks_rows() -> None:
    runs = run_checks(["b", "a"])
    rows = [run.to_dict() for run in runs]
    assert rows == [
        {"id": "whitelist/bad-data", "status": "pass", "finding_count": 0},
        {"id": "whitelist/ordering", "status": "fail", "finding_count": 2},
    ]
