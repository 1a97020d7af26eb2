# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import csv
import io

from license_table_report.report_generator.writers.abstract_table_writer import (
    TableWriter,
)
from license_table_report.table.table import Table


class CSVTableWriter(TableWriter):
    def write(self, table: Table) -> str:
        output = io.StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_ALL)

        writer.writerow(table.headings)
        for row in table.rows:
            writer.writerow(row)
        csv_string = output.getvalue()
        output.close()
        return csv_string
