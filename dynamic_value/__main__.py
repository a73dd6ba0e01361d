#!/usr/bin/env python3
"""
Dynamic Value Tool - Main Entry Point

This module allows the package to be run as a script:
    python -m dynamic_value
"""

# Local imports
from dynamic_value.adapters.cli.main import main

if __name__ == "__main__":
    main()
