#!/usr/bin/env python3
"""
Setup script for Color Ambience
Installs the package and its dependencies
"""

from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text() if (this_directory / "README.md").exists() else ""

# Read requirements
requirements = []
requirements_file = this_directory / "requirements.txt"
if requirements_file.exists():
    with open(requirements_file, "r") as f:
        requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="color-ambience",
    version="1.0.0",
    description="Samples a screen or window region and reduces it to representative colors",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],

    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0", "pytest-mock>=3.10"],
    },

    entry_points={
        "console_scripts": [
            "color-ambience=main:main",
        ],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Multimedia :: Graphics :: Capture :: Screen Capture",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: Microsoft :: Windows",
    ],

    python_requires=">=3.8",

    keywords="screen capture, ambient lighting, dominant color, k-means",
)
