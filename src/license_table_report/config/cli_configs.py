# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

from dataclasses import dataclass
from enum import Enum


class OutputFormat(Enum):
    """
    Enum for the supported renderings of a table.
    """

    TEXT = "text"
    CSV = "csv"
    JSON = "json"


class MissingProductKeyPolicy(Enum):
    """
    Enum for what to do with a product record that has no prod_key.
    """

    FAIL = "fail"
    EMPTY = "empty"


@dataclass
class Config:
    licence_table_title: str
    licence_table_headings: list[str]
    default_output_format: OutputFormat
    missing_product_key_policy: MissingProductKeyPolicy


default_config = Config(
    licence_table_title="Licenses",
    # "licence" is the column name consumers of the report already rely on
    licence_table_headings=["index", "licence", "product_keys"],
    default_output_format=OutputFormat.TEXT,
    missing_product_key_policy=MissingProductKeyPolicy.FAIL,
)
