#!/usr/bin/env python3
"""
Setup script for Tweaks package.
"""

from setuptools import setup, find_packages

setup(
    name="tweaks",
    version="0.3.0",
    description="Runtime-overridable, persisted application tweaks",
    author="Tweaks Team",
    package_dir={"": "src"},
    packages=find_packages("src", include=["tweaks", "tweaks.*"]),
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv>=1.0",
        "rich>=13.0",
        "typer>=0.9",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "tweaks=tweaks.cli.main:run",
        ],
    },
)
