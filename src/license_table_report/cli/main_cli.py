# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

# Main entry point for the license-table-report CLI tool

from typing import Annotated

import typer

from license_table_report.cli.render_licences_command import render_licences
from license_table_report.utils.logging import parse_log_level, setup_logging

app = typer.Typer(add_completion=False)
app.command()(render_licences)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL.",
        ),
    ] = "WARNING",
) -> None:
    try:
        setup_logging(parse_log_level(log_level))
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        ctx.exit(2)


if __name__ == "__main__":
    app()
