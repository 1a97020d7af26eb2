# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ProductRef:
    """A product distributed under a license."""

    prod_key: str | None  # None when the source record had no prod_key
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class ReportInput:
    """Pre-fetched results for the licence report."""

    # None means the results carried no licenses at all, which is not an error.
    # dicts keep insertion order, which is the order rows are emitted in.
    licenses: dict[str, list[ProductRef]] | None = None
