"""
pwstats Module Entry Point
===========================

Allows running the CLI via: python -m pwstats
"""

from pwstats.cli import main

if __name__ == "__main__":
    main()
