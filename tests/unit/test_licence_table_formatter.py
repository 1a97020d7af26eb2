# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging

import pytest
from pytest import LogCaptureFixture

from license_table_report.config.cli_configs import (
    Config,
    MissingProductKeyPolicy,
    OutputFormat,
    default_config,
)
from license_table_report.report_generator.formatters.licence_table_formatter import (
    LicenceTableFormatter,
    MalformedProductRecordError,
)
from license_table_report.results.report_input import ProductRef, ReportInput


def test_licence_table_formatter_starts_with_licenses_title_and_headings() -> None:
    formatter = LicenceTableFormatter()

    assert formatter.table.title == "Licenses"
    assert formatter.table.headings == ["index", "licence", "product_keys"]
    assert formatter.table.rows == []


def test_licence_table_formatter_shares_index_between_products_of_a_license() -> None:
    results = ReportInput(
        licenses={
            "MIT": [ProductRef(prod_key="a"), ProductRef(prod_key="b")],
            "Apache-2.0": [ProductRef(prod_key="c")],
        }
    )

    formatter = LicenceTableFormatter()
    formatter.format(results)

    assert formatter.table.rows == [
        (1, "MIT", "a"),
        (1, "MIT", "b"),
        (2, "Apache-2.0", "c"),
    ]


def test_licence_table_formatter_does_nothing_when_licenses_are_absent() -> None:
    formatter = LicenceTableFormatter()
    formatter.format(ReportInput())

    assert formatter.table.is_empty()


def test_licence_table_formatter_does_nothing_when_licenses_are_empty() -> None:
    formatter = LicenceTableFormatter()
    formatter.format(ReportInput(licenses={}))

    assert formatter.table.is_empty()


def test_licence_table_formatter_counts_licenses_without_products() -> None:
    # a license without products emits no rows but still takes an index
    results = ReportInput(
        licenses={
            "MIT": [ProductRef(prod_key="a")],
            "GPL-3.0": [],
            "BSD-3-Clause": [ProductRef(prod_key="b"), ProductRef(prod_key="c")],
        }
    )

    formatter = LicenceTableFormatter()
    formatter.format(results)

    assert formatter.table.rows == [
        (1, "MIT", "a"),
        (3, "BSD-3-Clause", "b"),
        (3, "BSD-3-Clause", "c"),
    ]


def test_licence_table_formatter_emits_one_row_per_product_in_input_order() -> None:
    licenses = {
        f"license-{n}": [ProductRef(prod_key=f"product-{n}-{m}") for m in range(n)]
        for n in range(5, 0, -1)
    }

    formatter = LicenceTableFormatter()
    formatter.format(ReportInput(licenses=licenses))

    assert len(formatter.table) == sum(len(products) for products in licenses.values())
    expected_rows = [
        (index, licence, product.prod_key)
        for index, (licence, products) in enumerate(licenses.items(), start=1)
        for product in products
    ]
    assert formatter.table.rows == expected_rows
    indexes = [row[0] for row in formatter.table.rows]
    assert indexes == sorted(indexes)


def test_licence_table_formatter_fails_on_missing_product_key_by_default() -> None:
    results = ReportInput(
        licenses={
            "MIT": [ProductRef(prod_key="a")],
            "Apache-2.0": [ProductRef(prod_key="b"), ProductRef(prod_key=None)],
        }
    )

    formatter = LicenceTableFormatter()
    with pytest.raises(MalformedProductRecordError, match="Apache-2.0") as exc_info:
        formatter.format(results)

    assert exc_info.value.licence == "Apache-2.0"
    assert exc_info.value.position == 1
    assert isinstance(exc_info.value, ValueError)
    # rows appended before the failure are kept
    assert formatter.table.rows == [(1, "MIT", "a"), (2, "Apache-2.0", "b")]


def test_licence_table_formatter_uses_empty_key_when_policy_is_empty(
    caplog: LogCaptureFixture,
) -> None:
    config = Config(
        licence_table_title="Licenses",
        licence_table_headings=["index", "licence", "product_keys"],
        default_output_format=OutputFormat.TEXT,
        missing_product_key_policy=MissingProductKeyPolicy.EMPTY,
    )
    results = ReportInput(
        licenses={"MIT": [ProductRef(prod_key=None), ProductRef(prod_key="b")]}
    )

    formatter = LicenceTableFormatter(config)
    with caplog.at_level(logging.WARNING):
        formatter.format(results)

    assert formatter.table.rows == [(1, "MIT", ""), (1, "MIT", "b")]
    expected_warning = "Product record 0 under license MIT has no prod_key"
    assert any(expected_warning in record.message for record in caplog.records)


def test_licence_table_formatter_instances_do_not_share_tables() -> None:
    first = LicenceTableFormatter()
    second = LicenceTableFormatter()

    first.format(ReportInput(licenses={"MIT": [ProductRef(prod_key="a")]}))

    assert len(first.table) == 1
    assert second.table.is_empty()
    assert default_config.licence_table_headings == ["index", "licence", "product_keys"]
