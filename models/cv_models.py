"""
CV Data Models

Pydantic models for stored CVs/resumes. A CV carries structured sections and/or
free text; reviews, job matches and cover letters reference it by id.

Serialized field names are camelCase (cvId, createdAt, ...) so stored records keep
the same shape as the rest of the collections.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional


class DomainModel(BaseModel):
    """Shared configuration for all persisted entities."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_record(self) -> dict:
        """Serialize to the stored (camelCase, JSON-compatible) representation."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_record(cls, record: dict):
        """Rebuild an entity from its stored representation."""
        return cls.model_validate(record)


class CVSection(BaseModel):
    title: str
    content: str = ""


class CV(DomainModel):
    id: str
    name: str
    sections: List[CVSection] = Field(default_factory=list)
    raw_text: str = ""

    # Set for records synthesized from an uploaded file that was never saved as a CV
    ephemeral: bool = False
    source_filename: Optional[str] = None

    created_at: str
    updated_at: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "3f2b9c0e7a8d4e1f9b6c5a4d3e2f1a0b",
                "name": "Software Engineer CV",
                "sections": [
                    {"title": "Summary", "content": "Backend engineer with 5 years of Python."},
                    {"title": "Skills", "content": "Python, SQL, Docker"},
                ],
                "rawText": "",
                "ephemeral": False,
                "createdAt": "2025-01-15T14:30:00.000000Z",
                "updatedAt": "2025-01-15T14:30:00.000000Z",
            }
        }
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("CV name must not be empty")
        return value

    def full_text(self) -> str:
        """All CV text (sections then raw text) as a single string for scoring."""
        parts = []
        for section in self.sections:
            parts.append(section.title)
            if section.content:
                parts.append(section.content)
        if self.raw_text:
            parts.append(self.raw_text)
        return "\n".join(parts)
