from setuptools import setup, find_packages

setup(
    name="license-table-report",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
        ],
    },
    entry_points={
        "console_scripts": [
            "license-table-report=license_table_report.cli.main_cli:app",
        ],
    },
    author="Damian Vicino",
    author_email="damian.vicino@datadoghq.com",
    description="Renders the licenses of a project and the product keys distributed under each of them as a report table",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
