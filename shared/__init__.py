"""
Passgen Shared Module
=====================

Configuration, structured logging, console output, and result models
shared by the passgen command-line tool and its analyzers.
"""

from shared.config import PassgenConfig

__all__ = ["PassgenConfig"]
