from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from whitelistctl.core.model import FindingKind
from whitelistctl.core.policy import DEFAULT_POLICY
from whitelistctl.core.validator import added_lines, expected_order, validate

_lines = st.lists(st.text(alphabet="abdABD xyz-", max_size=6), max_size=12)


@pytest.mark.unit
@given(_lines, st.data())
def test_same_line_set_never_reports(master: list[str], data: st.DataObject) -> None:
    updated = data.draw(st.permutations(master))
    extra = data.draw(st.lists(st.sampled_from(master), max_size=4)) if master else []
    assert validate(master, [*updated, *extra]) == []


@pytest.mark.unit
@given(_lines, _lines)
def test_added_lines_come_from_updated_only(master: list[str], updated: list[str]) -> None:
    added = added_lines(master, updated)
    assert all(line in updated for line in added)
    assert not set(added) & set(master)


@pytest.mark.unit
@given(_lines, _lines)
def test_bad_data_findings_match_marker(master: list[str], updated: list[str]) -> None:
    added = added_lines(master, updated)
    for finding in validate(master, updated):
        if finding.kind is FindingKind.BAD_DATA:
            assert finding.text.lower().startswith(DEFAULT_POLICY.marker)
            assert added[finding.position - 1] == finding.text


@pytest.mark.unit
@given(_lines, _lines)
@settings(deadline=None)
def test_unordered_findings_rebuild_sorted_lines(master: list[str], updated: list[str]) -> None:
    added = added_lines(master, updated)
    patched = list(added)
    for finding in validate(master, updated):
        if finding.kind is FindingKind.UNORDERED:
            patched[finding.position - 1] = finding.text
    assert patched == expected_order(added)


@pytest.mark.unit
@given(_lines, _lines)
def test_validation_is_deterministic(master: list[str], updated: list[str]) -> None:
    assert validate(master, updated) == validate(list(master), list(updated))
