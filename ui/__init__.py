"""
User Interface Package

Components:
- CLI: Command-line interface over the controller
"""

from .cli import CLI

__all__ = ['CLI']
