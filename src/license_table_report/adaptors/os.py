# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2025-present Datadog, Inc.

"""File system wrappers kept in one place so they can be replaced during testing."""


def open_file(file_path: str) -> str:
    try:
        with open(file_path, "r", encoding="utf-8") as file:
            return file.read()
    except UnicodeDecodeError:
        with open(file_path, "r", encoding="utf-16") as file:
            return file.read()


def write_file(file_path: str, content: str) -> None:
    with open(file_path, "w", encoding="utf-8", newline="") as file:
        file.write(content)
