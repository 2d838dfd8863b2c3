#!/usr/bin/env python3
"""
Standalone entry point for the JWT Decode tool.

Usage:
    python3 jwt-decode.py <token>
    python3 jwt-decode.py -t <token> --format json
    echo '<token>' | python3 jwt-decode.py --stdin

This shim delegates to the jwt_decode package in src/.
"""

import os
import sys

# Ensure the src/ directory is on the Python path so the package can be found
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from jwt_decode.cli import main

if __name__ == "__main__":
    main()
