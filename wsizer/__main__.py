"""
Main entry point for running wsizer as a module.

Usage:
    python -m wsizer cycle --frame 0,0,1280,720 --work-area 0,0,1920,1080
"""

from .cli import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
