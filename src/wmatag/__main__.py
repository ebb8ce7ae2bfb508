"""
Main entry point for running wmatag as a module.
Allows: python -m wmatag ...
"""
import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
