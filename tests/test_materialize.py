"""Tests for paged and linked frame materialization."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from contracts.report_types import Paging, ReportFrameDefinition
from infra.config import clear_settings_cache
from pipeline.reporter.materialize import iter_frames, materialize_frames, materialize_linked
from tests.factories import make_definition, make_row


@pytest.fixture(autouse=True)
def _fresh_settings() -> Any:
    clear_settings_cache()
    yield
    clear_settings_cache()


def _rows(n: int) -> list:
    return [make_row(account_id=str(i), name=f"acct-{i}") for i in range(n)]


def test_pages_split_by_page_size() -> None:
    frames = materialize_frames(make_definition(), _rows(5), page_size=2)

    assert [f.size() for f in frames] == [2, 2, 1]
    assert [f.rows[0][0] for f in frames] == ["0", "2", "4"]


def test_exact_multiple_does_not_emit_trailing_empty_frame() -> None:
    frames = materialize_frames(make_definition(), _rows(4), page_size=2)

    assert [f.size() for f in frames] == [2, 2]


def test_zero_page_size_means_single_frame() -> None:
    frames = materialize_frames(make_definition(), _rows(5), page_size=0)

    assert len(frames) == 1
    assert frames[0].size() == 5


def test_empty_input_yields_one_empty_frame_with_metadata() -> None:
    frames = materialize_frames(make_definition(), [], page_size=10)

    assert len(frames) == 1
    assert frames[0].size() == 0
    assert frames[0].name == "accounts"


def test_negative_page_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        materialize_frames(make_definition(), _rows(1), page_size=-1)


def test_page_size_defaults_to_settings(monkeypatch: Any) -> None:
    monkeypatch.setenv("REPORT_PAGE_SIZE", "3")

    frames = materialize_frames(make_definition(), _rows(7))

    assert [f.size() for f in frames] == [3, 3, 1]


def test_pages_have_independent_paging() -> None:
    frames = materialize_frames(make_definition(paging=Paging(limit=2, page_cursor="p")), _rows(4), page_size=2)

    frames[0].paging.page_cursor = "changed"

    assert frames[1].paging.page_cursor == "p"
    assert frames[0].paging is not frames[1].paging


def test_link_column_is_tracked_per_page() -> None:
    frames = materialize_frames(make_definition(), _rows(3), page_size=2, link_column="account_id")

    assert [f.ref_value for f in frames] == ["1", "2"]
    assert all(f.rel_column == "account_id" for f in frames)


def test_iter_frames_is_lazy() -> None:
    consumed: list[int] = []

    def source():
        for i in range(4):
            consumed.append(i)
            yield make_row(account_id=str(i))

    it = iter_frames(make_definition(), source(), page_size=2)
    first = next(it)

    assert first.size() == 2
    assert consumed == [0, 1]


def test_linked_groups_consecutive_values() -> None:
    defn = ReportFrameDefinition(name="contacts", columns=("account_id", "contact"))
    rows = [
        make_row(account_id=1, contact="a"),
        make_row(account_id=1, contact="b"),
        make_row(account_id=2, contact="c"),
        make_row(account_id=1, contact="d"),
    ]

    grouped = materialize_linked(defn, rows, "account_id")

    assert list(grouped) == ["1", "2"]
    assert [f.rows for f in grouped["1"]] == [
        [("1", "a"), ("1", "b")],
        [("1", "d")],
    ]
    assert grouped["2"][0].rows == [("2", "c")]
    assert all(f.rel_column == "account_id" for fs in grouped.values() for f in fs)


def test_linked_rows_without_link_value_group_under_empty_key() -> None:
    defn = ReportFrameDefinition(columns=("account_id", "contact"))
    rows = [make_row(contact="orphan"), make_row(account_id=5, contact="x")]

    grouped = materialize_linked(defn, rows, "account_id")

    assert grouped[""][0].rows == [("", "orphan")]
    assert grouped["5"][0].rows == [("5", "x")]


def test_linked_empty_input_is_empty() -> None:
    assert materialize_linked(make_definition(), [], "account_id") == {}


def test_linked_requires_column() -> None:
    with pytest.raises(ValueError):
        materialize_linked(make_definition(), [], "")


def test_frame_events_logged_when_enabled(monkeypatch: Any, caplog: Any) -> None:
    monkeypatch.setenv("REPORT_LOG_FRAMES", "1")
    caplog.set_level(logging.INFO, logger="pipeline.reporter.materialize")

    materialize_frames(make_definition(), _rows(3), page_size=2)

    events = [r for r in caplog.records if getattr(r, "event", "") == "frame_page"]
    assert [r.rows for r in events] == [2, 1]
    assert [r.page for r in events] == [1, 2]
