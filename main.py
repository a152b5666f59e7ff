#!/usr/bin/env python3
"""
Legacy runner - forwards to the tamc CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from tamlang.cli.main import cli

if __name__ == "__main__":
    # No arguments: check the project's default file list
    if len(sys.argv) == 1:
        sys.argv.append('check')

    # Support legacy: main.py a.tk b.tk → tamc check a.tk b.tk
    elif sys.argv[1].endswith('.tk'):
        sys.argv.insert(1, 'check')

    cli()
