#!/usr/bin/env python3
"""
domchain Setup
"""

import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))

# Read requirements from requirements.txt
with open(os.path.join(here, 'requirements.txt')) as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open(os.path.join(here, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="domchain",
    version="1.0.0",
    description="Chainable element trees and a compact markup parser",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="domchain developers",
    packages=find_packages(include=["domchain", "domchain.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "domchain=domchain.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Text Processing :: Markup :: HTML",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="dom, html, markup, parser, builder",
)
