from __future__ import annotations

import logging

import pytest

from patentclean.services.cleaning.dedup import (
    SelectiveMode,
    SimpleMode,
    remove_dups,
    resolve_keep,
    show_dups,
)

KEYS = ["US123", "US123", "US456"]


def test_show_dups_flags_every_group_member():
    assert show_dups(KEYS) == [True, True, False]
    assert show_dups(["a", "b", "a", "c", "a"]) == [True, False, True, False, True]


def test_simple_mode_keeps_first_occurrence(caplog):
    with caplog.at_level(logging.INFO):
        keep = resolve_keep(KEYS, SimpleMode())
    assert keep == [True, False, True]
    assert "Removing 1 duplicates." in caplog.text


def test_simple_mode_reports_no_duplicates(caplog):
    with caplog.at_level(logging.INFO):
        assert resolve_keep(["a", "b"], SimpleMode()) == [True, True]
    assert "No duplicates found." in caplog.text


def test_selective_mode_keeps_preferred_type():
    mode = SelectiveMode(
        has_dup=[True, True, False],
        doc_types=["app", "grant", "grant"],
        keep_type="grant",
    )
    assert resolve_keep(KEYS, mode) == [False, True, True]


def test_selective_mode_drops_group_without_keep_type():
    # documented behaviour: no survivor is invented for the group
    keys = ["US123", "US123", "US456"]
    mode = SelectiveMode(
        has_dup=show_dups(keys),
        doc_types=["app", "search report", "app"],
        keep_type="grant",
    )
    assert resolve_keep(keys, mode) == [False, False, True]


def test_selective_mode_keeps_unclassified_singletons():
    mode = SelectiveMode(has_dup=[False], doc_types=[None], keep_type="grant")
    assert resolve_keep(["US1"], mode) == [True]


def test_selective_mode_rejects_length_mismatch():
    with pytest.raises(ValueError):
        resolve_keep(KEYS, SelectiveMode(has_dup=[True], doc_types=["app"], keep_type="grant"))


def test_remove_dups_infers_mode():
    assert remove_dups(KEYS) == [True, False, True]
    assert remove_dups(
        KEYS,
        has_dup=[True, True, False],
        doc_types=["app", "grant", "grant"],
        keep_type="grant",
    ) == [False, True, True]


def test_remove_dups_partial_arguments_keep_everything(caplog):
    with caplog.at_level(logging.WARNING):
        keep = remove_dups(KEYS, has_dup=[True, True, False])
    assert keep == [True, True, True]
    assert "Invalid remove_dups arguments" in caplog.text


def test_blank_keys_group_together():
    keys = ["", None, "", None, "US1"]
    assert show_dups(keys) == [True, True, True, True, False]
    assert resolve_keep(keys, SimpleMode()) == [True, True, False, False, True]
