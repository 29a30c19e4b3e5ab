#!/usr/bin/env python3
"""Setup script for Mizan Arabic morphology engine."""

from setuptools import setup, find_packages

setup(
    name="mizan",
    version="1.0.0",
    description="Arabic derived word generation and validation from roots and schemes",
    author="Mizan Team",
    python_requires=">=3.9",
    packages=find_packages(include=["mizan_morphology", "mizan_morphology.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "mizan=mizan_morphology.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
    ],
)
