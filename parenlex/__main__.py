"""
Entry point for running parenlex as a module.

Usage:
    python -m parenlex tokenize program.lisp
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
