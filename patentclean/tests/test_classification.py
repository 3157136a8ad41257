from __future__ import annotations

import logging

import pytest

from patentclean.services.cleaning.classification import (
    DEFAULT_DICTIONARIES,
    NA,
    DocTypeDictionaries,
    classify_doc_type,
    doc_type_label,
    generate_doc_types,
)


@pytest.fixture
def dictionaries():
    return DocTypeDictionaries(
        cakc={"USB2": "grant", "USA1": "app"},
        doc_length={"US7": "design", "US11": "app"},
    )


def test_kind_code_dictionary_wins_over_length(dictionaries):
    assert dictionaries.doc_length["US7"] != dictionaries.cakc["USB2"]
    assert classify_doc_type("US7", "USB2", dictionaries) == "grant"


def test_length_dictionary_used_when_kind_code_unknown(dictionaries):
    assert classify_doc_type("US11", "US", dictionaries) == "app"


def test_unknown_keys_are_na(dictionaries):
    assert classify_doc_type("ZZ9", "ZZQ", dictionaries) is None
    assert doc_type_label(classify_doc_type("ZZ9", "ZZQ", dictionaries)) == NA == "NA"


def test_generate_doc_types_preserves_order_and_warns(dictionaries, caplog):
    with caplog.at_level(logging.WARNING):
        doc_types = generate_doc_types(["US7", "ZZ9", "US11"], ["USB2", "ZZQ", "US"], dictionaries)

    assert doc_types == ["grant", None, "app"]
    assert "1 rows will be NA" in caplog.text


def test_generate_doc_types_silent_when_all_found(dictionaries, caplog):
    with caplog.at_level(logging.WARNING):
        generate_doc_types(["US7"], ["USB2"], dictionaries)
    assert caplog.records == []


def test_generate_doc_types_rejects_length_mismatch(dictionaries):
    with pytest.raises(ValueError):
        generate_doc_types(["US7", "US11"], ["USB2"], dictionaries)


def test_dictionaries_are_read_only_and_extendable():
    with pytest.raises(TypeError):
        DEFAULT_DICTIONARIES.cakc["XXA"] = "app"  # type: ignore[index]

    extended = DEFAULT_DICTIONARIES.extend(cakc={"XXA": "app"})
    assert classify_doc_type("XX5", "XXA", extended) == "app"
    assert "XXA" not in DEFAULT_DICTIONARIES.cakc


def test_default_dictionaries_cover_common_offices():
    assert classify_doc_type("US7", "USB2") == "grant"
    assert classify_doc_type("US11", "USA1") == "app"
    assert classify_doc_type("WO10", "WOA1") == "app"
    assert classify_doc_type("USRE5", "USREE") == "reissue"
    assert classify_doc_type("USD6", "USDS") == "design"
