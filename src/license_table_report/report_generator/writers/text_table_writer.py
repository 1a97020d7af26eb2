# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from license_table_report.report_generator.writers.abstract_table_writer import (
    TableWriter,
)
from license_table_report.table.table import Table


class TextTableWriter(TableWriter):
    """
    Renders a table as a plain text grid for terminal output.
    """

    def write(self, table: Table) -> str:
        widths = []
        for column, heading in enumerate(table.headings):
            max_content = max((len(str(row[column])) for row in table.rows), default=0)
            widths.append(max(len(heading), max_content))

        # e.g. "{:<5} | {:<10} | {:<12}"
        format_str = " | ".join(f"{{:<{width}}}" for width in widths)

        header_row = format_str.format(*[h.upper() for h in table.headings]).rstrip()
        separator = "-" * len(format_str.format(*[""] * len(widths)))

        lines = [table.title, separator, header_row, separator]
        for row in table.rows:
            lines.append(format_str.format(*[str(cell) for cell in row]).rstrip())
        if table.rows:
            lines.append(separator)
        return "\n".join(lines) + "\n"
