#!/usr/bin/env python3
"""
Prospect Intake - Entry Point

Usage:
    python run.py              # Interactive mode
    python run.py config       # Show configuration status
    python run.py version      # Show version
"""

import sys

from intake.cli import main

if __name__ == '__main__':
    sys.exit(main())
