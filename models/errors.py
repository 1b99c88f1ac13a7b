"""
Error Taxonomy

Exceptions raised by the persistence store and the analysis agents.
Validation errors are raised before any state transition or write.
"""

from typing import Iterable


class CareerAssistantError(Exception):
    """Base class for all domain errors."""


class MissingInput(CareerAssistantError):
    """A required field is absent or empty. Recoverable: supply it and retry."""

    def __init__(self, fields: Iterable[str], message: str = None):
        self.fields = list(fields)
        super().__init__(message or f"Missing required input: {', '.join(self.fields)}")


class InvalidProfile(CareerAssistantError):
    """Profile fields failed validation."""


class StorageUnavailable(CareerAssistantError):
    """The backing storage medium refused a write (quota, permissions, disabled)."""

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        self.reason = reason
        super().__init__(f"Storage unavailable for '{key}'" + (f": {reason}" if reason else ""))


class ReferenceNotFound(CareerAssistantError):
    """A referenced entity does not exist in the store."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} '{entity_id}' does not exist")


class WorkflowBusy(CareerAssistantError):
    """A workflow instance was invoked while a request is still pending."""
