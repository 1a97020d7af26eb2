# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from license_table_report.report_generator.writers.abstract_table_writer import (
    TableWriter,
)
from license_table_report.table.table import Table


class ReportGenerator:
    def __init__(self, table_writer: TableWriter):
        self.table_writer = table_writer

    def generate_report(self, table: Table) -> str:
        return self.table_writer.write(table)
