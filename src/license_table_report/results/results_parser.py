# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

import json
import logging
from typing import Any

from license_table_report.adaptors.os import open_file
from license_table_report.results.report_input import ProductRef, ReportInput


class ResultsParser:
    """Parser for the JSON results consumed by the licence report."""

    @staticmethod
    def parse_product(licence: str, product: Any) -> ProductRef:
        if not isinstance(product, dict):
            raise ValueError(
                f"Invalid product record under license {licence}: expected an object, got {type(product).__name__}"
            )
        extra = {key: value for key, value in product.items() if key != "prod_key"}
        prod_key = product.get("prod_key")
        # bool is an int subclass, but true/false are not product keys
        if prod_key is not None and (
            isinstance(prod_key, bool) or not isinstance(prod_key, (str, int, float))
        ):
            raise ValueError(
                f"Invalid prod_key under license {licence}: expected a string, got {type(prod_key).__name__}"
            )
        return ProductRef(
            prod_key=None if prod_key is None else str(prod_key), extra=extra
        )

    @staticmethod
    def parse_results(data: Any) -> ReportInput:
        """Convert decoded JSON results into a ReportInput.

        JSON format: {"licenses": {"MIT": [{"prod_key": "a"}, {"prod_key": "b"}]}}

        Args:
            data: The decoded JSON document

        Returns:
            A ReportInput, with licenses set to None when the document has none

        Raises:
            ValueError: If the document or its licenses have the wrong shape
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid results format: expected an object, got {type(data).__name__}"
            )
        licenses = data.get("licenses")
        if licenses is None:
            return ReportInput(licenses=None)
        if not isinstance(licenses, dict):
            raise ValueError(
                f"Invalid licenses format: expected an object, got {type(licenses).__name__}"
            )

        parsed: dict[str, list[ProductRef]] = {}
        for licence, products in licenses.items():
            if not isinstance(products, list):
                raise ValueError(
                    f"Invalid products for license {licence}: expected a list, got {type(products).__name__}"
                )
            parsed[licence] = [
                ResultsParser.parse_product(licence, product) for product in products
            ]
        return ReportInput(licenses=parsed)

    @staticmethod
    def load_results(results_file_path: str) -> ReportInput:
        """Load results from a JSON file.

        Raises:
            FileNotFoundError: If the results file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the results format is invalid
        """
        try:
            return ResultsParser.parse_results(json.loads(open_file(results_file_path)))
        except FileNotFoundError:
            logging.error(f"Results file not found: {results_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in results file: {results_file_path}")
            raise
        except Exception as e:
            logging.error(f"Failed to load results: {str(e)}")
            raise
