# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Table:
    """A titled table of rows, handed over to a writer for rendering."""

    title: str
    headings: list[str]
    rows: list[tuple[Any, ...]] = field(default_factory=list)

    def add_row(self, row: tuple[Any, ...]) -> None:
        if len(row) != len(self.headings):
            raise ValueError(
                f"Row {row} has {len(row)} cells but table {self.title} has {len(self.headings)} headings"
            )
        self.rows.append(row)

    def is_empty(self) -> bool:
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)
