# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import logging

from license_table_report.config.cli_configs import (
    Config,
    MissingProductKeyPolicy,
    default_config,
)
from license_table_report.report_generator.formatters.abstract_table_formatter import (
    TableFormatter,
)
from license_table_report.results.report_input import ReportInput


class MalformedProductRecordError(ValueError):
    def __init__(self, licence: str, position: int):
        self.licence = licence
        self.position = position
        super().__init__(
            f"Product record {position} under license {licence} has no prod_key"
        )


class LicenceTableFormatter(TableFormatter):
    """
    Lays out licenses and the products distributed under them, one row per
    product. All products of a license share the same index.
    """

    def __init__(self, config: Config = default_config):
        super().__init__(config.licence_table_title, config.licence_table_headings)
        self.missing_product_key_policy = config.missing_product_key_policy

    def format(self, results: ReportInput) -> None:
        if results.licenses is None:
            return

        for index, (licence, products) in enumerate(results.licenses.items(), start=1):
            for position, product in enumerate(products):
                prod_key = product.prod_key
                if prod_key is None:
                    if self.missing_product_key_policy == MissingProductKeyPolicy.FAIL:
                        raise MalformedProductRecordError(licence, position)
                    logging.warning(
                        f"Product record {position} under license {licence} has no prod_key. Using an empty key."
                    )
                    prod_key = ""
                self.table.add_row((index, licence, prod_key))
