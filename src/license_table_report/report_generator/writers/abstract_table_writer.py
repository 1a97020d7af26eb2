# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from abc import ABC, abstractmethod

from license_table_report.table.table import Table


class TableWriter(ABC):
    @abstractmethod
    def write(self, table: Table) -> str:
        raise NotImplementedError
