#!/usr/bin/env python3
"""
restservice Setup Script
========================
Allows installation of the restservice package.

Usage:
    pip install -e .           # Development install
    pip install -e ".[test]"   # With test dependencies
    pip install .              # Regular install
"""

from setuptools import setup, find_packages

setup(
    name="restservice",
    version="1.0.0",
    packages=find_packages(include=["restservice", "restservice.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.100",
        "uvicorn>=0.29",
    ],
    extras_require={
        "client": [
            "httpx>=0.24",
        ],
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "restservice=restservice.server:main",
        ],
    },
)
