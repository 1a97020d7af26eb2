# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json

from license_table_report.report_generator.writers.abstract_table_writer import (
    TableWriter,
)
from license_table_report.table.table import Table


class JSONTableWriter(TableWriter):
    """
    Writes a table as a JSON object with its title, headings and rows.
    """

    def write(self, table: Table) -> str:
        json_table = {
            "title": table.title,
            "headings": table.headings,
            "rows": [list(row) for row in table.rows],
        }
        return json.dumps(json_table, indent=2)
