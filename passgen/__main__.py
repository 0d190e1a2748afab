"""
Passgen Module Entry Point
===========================

Allows running the passgen CLI via: python -m passgen
"""

from passgen.cli import main

if __name__ == "__main__":
    main()
