"""tokenizeのユニットテスト。"""

import pytest

from namelint.models.errors import MalformedIdentifierError
from namelint.models.identifier import Candidate
from namelint.models.rules import LayerRule
from namelint.validators.tokenizer import tokenize

MEDALLION_LAYERS = {
    "raw": LayerRule(
        prefix="raw",
        name="Raw",
        pattern="raw_<party>__<source>__<table>",
        segments=("party", "source", "table"),
        pluralization="singular",
        key_suffix="_key",
    ),
    "int": LayerRule(
        prefix="int",
        name="Integration",
        pattern="int_<subject>__<entity>",
        segments=("subject", "entity"),
        pluralization="singular",
        key_suffix="_key",
    ),
    "anl": LayerRule(
        prefix="anl",
        name="Analytics",
        pattern="anl_<subject>__<fact|dim>_<name>",
        segments=("subject", "model"),
        pluralization="plural",
        key_suffix="_key",
        model_type_required=True,
    ),
}


class TestTokenizeModel:
    def test_raw_model(self) -> None:
        identifier = tokenize(Candidate(name="raw_acme__salesforce__account"), MEDALLION_LAYERS)
        assert identifier.prefix == "raw"
        assert identifier.segments == ("acme", "salesforce", "account")
        assert identifier.short_form is False
        assert identifier.layer == "raw"

    def test_segment_keeps_single_underscores(self) -> None:
        identifier = tokenize(Candidate(name="anl_sales__fact_order_lines"), MEDALLION_LAYERS)
        assert identifier.segments == ("sales", "fact_order_lines")

    def test_unknown_prefix_has_no_layer(self) -> None:
        identifier = tokenize(Candidate(name="stg_salesforce__account"), MEDALLION_LAYERS)
        assert identifier.prefix is None
        assert identifier.layer is None

    def test_short_form_with_layer_hint(self) -> None:
        identifier = tokenize(Candidate(name="dim_customers", layer="anl"), MEDALLION_LAYERS)
        assert identifier.prefix is None
        assert identifier.short_form is True
        assert identifier.segments == ("dim_customers",)
        assert identifier.layer == "anl"

    def test_prefix_wins_over_hint(self) -> None:
        identifier = tokenize(Candidate(name="anl_sales__dim_customers", layer="anl"), MEDALLION_LAYERS)
        assert identifier.prefix == "anl"
        assert identifier.short_form is False

    def test_double_underscore_after_prefix(self) -> None:
        with pytest.raises(MalformedIdentifierError, match="single '_'"):
            tokenize(Candidate(name="raw__acme__salesforce__account"), MEDALLION_LAYERS)

    def test_short_form_with_double_underscore(self) -> None:
        with pytest.raises(MalformedIdentifierError):
            tokenize(Candidate(name="sales__dim_customers", layer="anl"), MEDALLION_LAYERS)


class TestTokenizeColumn:
    def test_column(self) -> None:
        identifier = tokenize(Candidate(name="customer_key", kind="column"), MEDALLION_LAYERS)
        assert identifier.kind == "column"
        assert identifier.prefix is None
        assert identifier.segments == ("customer_key",)

    def test_column_keeps_layer_hint(self) -> None:
        identifier = tokenize(Candidate(name="customer_key", kind="column", layer="raw"), MEDALLION_LAYERS)
        assert identifier.layer_hint == "raw"

    def test_column_with_double_underscore(self) -> None:
        with pytest.raises(MalformedIdentifierError):
            tokenize(Candidate(name="customer__key", kind="column"), MEDALLION_LAYERS)


class TestMalformed:
    @pytest.mark.parametrize(
        "name",
        [
            "int sales customer",
            "Raw_acme__salesforce__account",
            "raw-acme__salesforce__account",
            "anl_sales__fact_orders.sql",
        ],
    )
    def test_disallowed_characters(self, name: str) -> None:
        with pytest.raises(MalformedIdentifierError) as exc_info:
            tokenize(Candidate(name=name), MEDALLION_LAYERS)
        assert "[a-z0-9_]" in exc_info.value.reason

    def test_empty(self) -> None:
        with pytest.raises(MalformedIdentifierError, match="empty"):
            tokenize(Candidate(name=""), MEDALLION_LAYERS)

    @pytest.mark.parametrize("name", ["_raw_acme", "raw_acme_", "raw_acme___salesforce"])
    def test_inconsistent_delimiters(self, name: str) -> None:
        with pytest.raises(MalformedIdentifierError):
            tokenize(Candidate(name=name), MEDALLION_LAYERS)


class TestDelimiterMismatch:
    def test_single_underscore_where_double_required(self) -> None:
        with pytest.raises(MalformedIdentifierError, match="delimiter usage inconsistent") as exc_info:
            tokenize(Candidate(name="raw_acme_salesforce_account"), MEDALLION_LAYERS)
        assert exc_info.value.expected == "raw_<party>__<source>__<table>"

    def test_double_underscore_where_single_required(self) -> None:
        with pytest.raises(MalformedIdentifierError, match="delimiter usage inconsistent") as exc_info:
            tokenize(Candidate(name="anl_sales__fact__orders"), MEDALLION_LAYERS)
        assert exc_info.value.expected == "anl_<subject>__<fact|dim>_<name>"

    def test_too_many_segments(self) -> None:
        with pytest.raises(MalformedIdentifierError, match="expects 2"):
            tokenize(Candidate(name="int_sales__crm__customer"), MEDALLION_LAYERS)

    def test_short_form_is_not_counted(self) -> None:
        identifier = tokenize(Candidate(name="dim_customers", layer="anl"), MEDALLION_LAYERS)
        assert identifier.segments == ("dim_customers",)
