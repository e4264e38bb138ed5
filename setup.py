#!/usr/bin/env python3
"""
Setup script for Apple Notes Exporter
Allows installation via pip
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read README
this_directory = Path(__file__).parent
long_description = (
    (this_directory / "README.md").read_text(encoding="utf-8")
    if (this_directory / "README.md").exists()
    else ""
)

setup(
    name="apple-notes-exporter",
    version="0.3.0",
    author="Apple Notes Exporter Contributors",
    author_email="",
    description="Export Apple Notes folders recursively to HTML via AppleScript",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/apple-notes-exporter",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "notes_exporter": ["vendor/apple-notes-exporter/scripts/*.applescript"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: MacOS",
    ],
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "apple-notes-exporter=notes_exporter.main:main",
            "apple-notes-exporter-raw=notes_exporter.cli.passthrough:main",
        ],
    },
    install_requires=[
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "hypothesis>=6.0",
            "faker>=18.0",
        ],
    },
    keywords="apple notes, export, applescript, osascript, html, macos",
    project_urls={
        "Bug Reports": "https://github.com/yourusername/apple-notes-exporter/issues",
        "Source": "https://github.com/yourusername/apple-notes-exporter",
    },
)
