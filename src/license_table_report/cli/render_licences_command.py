# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Command for rendering the licence table of a results file

import json
import logging
from dataclasses import replace
from typing import Annotated

import typer

from license_table_report.adaptors.os import write_file
from license_table_report.config.cli_configs import (
    MissingProductKeyPolicy,
    OutputFormat,
    default_config,
)
from license_table_report.report_generator.formatters.licence_table_formatter import (
    LicenceTableFormatter,
    MalformedProductRecordError,
)
from license_table_report.report_generator.report_generator import ReportGenerator
from license_table_report.report_generator.writers.abstract_table_writer import (
    TableWriter,
)
from license_table_report.report_generator.writers.csv_table_writer import (
    CSVTableWriter,
)
from license_table_report.report_generator.writers.json_table_writer import (
    JSONTableWriter,
)
from license_table_report.report_generator.writers.text_table_writer import (
    TextTableWriter,
)
from license_table_report.results.results_parser import ResultsParser


def writer_for(output_format: OutputFormat) -> TableWriter:
    if output_format == OutputFormat.CSV:
        return CSVTableWriter()
    if output_format == OutputFormat.JSON:
        return JSONTableWriter()
    return TextTableWriter()


def render_licences(
    results_file: Annotated[
        str,
        typer.Argument(
            help="Path to a JSON results file with a 'licenses' object mapping license names to products."
        ),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Rendering of the table.",
            case_sensitive=False,
        ),
    ] = default_config.default_output_format,
    output_file: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Write the rendered table to this file instead of stdout.",
        ),
    ] = "",
    missing_product_key_policy: Annotated[
        MissingProductKeyPolicy,
        typer.Option(
            "--on-missing-product-key",
            help=(
                "What to do with product records without a prod_key: "
                "fail the report or render an empty key."
            ),
            case_sensitive=False,
        ),
    ] = default_config.missing_product_key_policy,
    title: Annotated[
        str,
        typer.Option("--title", help="Title of the rendered table."),
    ] = default_config.licence_table_title,
) -> None:
    """
    Render the licenses of a results file and the product keys distributed under each of them.
    """
    try:
        results = ResultsParser.load_results(results_file)
    except FileNotFoundError:
        typer.echo(f"Error: File '{results_file}' not found.", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not read '{results_file}': {e}", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON in '{results_file}': {e}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    config = replace(
        default_config,
        licence_table_title=title,
        missing_product_key_policy=missing_product_key_policy,
    )
    formatter = LicenceTableFormatter(config)
    try:
        formatter.format(results)
    except MalformedProductRecordError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if results.licenses is None:
        logging.info(f"No licenses found in {results_file}. Rendering an empty table.")

    report = ReportGenerator(writer_for(output_format)).generate_report(formatter.table)

    if not output_file:
        typer.echo(report, nl=False)
        return

    try:
        write_file(output_file, report)
    except OSError as e:
        typer.echo(f"Error writing report file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(
        f"Wrote {len(formatter.table)} row(s) of the licence table to {output_file}"
    )
