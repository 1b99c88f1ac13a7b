"""
Configuration Package

Loads the settings dict (.env file + environment, with validated defaults)
that the controller, storage backend and logging are built from.

Components:
- load_settings: Build the nested settings dict
- VALID_BACKENDS / VALID_MATCH_SCORERS: Accepted values for selection settings
"""

from .settings import VALID_BACKENDS, VALID_MATCH_SCORERS, load_settings

__all__ = ['load_settings', 'VALID_BACKENDS', 'VALID_MATCH_SCORERS']
