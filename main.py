#!/usr/bin/env python3
"""
domchain - Main Entry Point

Run from a source checkout: ``python main.py page.dcm --pretty``.
"""

import sys

from domchain.main import main

if __name__ == "__main__":
    sys.exit(main())
