"""
Orchestrator Package

This package contains the component that wires storage, agents and logging
together and exposes the caller-facing operations.

Components:
- Controller: Caller-facing facade over the store and the analysis agents
"""

from .controller import Controller

__all__ = ['Controller']
