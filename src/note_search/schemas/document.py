"""
Document model for indexed diary entries.

Documents are frozen: the index keeps references to them, so every edit
produces a new instance that carries the same identifier.
"""

import uuid
from datetime import date, datetime
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

PREVIEW_LENGTH = 150


class Document(BaseModel):
    """
    A single note entry.

    The identifier is assigned at creation and never changes. Title, body,
    tags and the favorite flag are searchable; mood is carried along for
    the presentation layer only.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Immutable unique identifier"
    )
    title: str = Field("Untitled Entry", description="Entry title")
    body: str = Field("", description="Entry text")
    tags: Tuple[str, ...] = Field(
        default_factory=tuple,
        description="Distinct tags in first-seen order"
    )
    created_at: datetime = Field(default_factory=datetime.now)
    modified_at: datetime = Field(default_factory=datetime.now)
    favorite: bool = False
    mood: str = "Neutral"

    @field_validator("title", "body", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat missing text as empty text"""
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def dedupe_tags(cls, v: Any) -> Tuple[str, ...]:
        """Drop blank and repeated tags, keep first-seen order"""
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]

        seen = []
        for tag in v:
            if tag is None or not str(tag).strip():
                continue
            if tag not in seen:
                seen.append(tag)
        return tuple(seen)

    @property
    def created_date(self) -> date:
        """Calendar date the entry was created on"""
        return self.created_at.date()

    @property
    def preview(self) -> str:
        """Short body excerpt for list views"""
        if len(self.body) > PREVIEW_LENGTH:
            return self.body[:PREVIEW_LENGTH] + "..."
        return self.body

    def with_changes(self, **changes: Any) -> "Document":
        """
        Return an edited copy with a refreshed modification time.

        The identifier cannot be changed this way.

        Args:
            **changes: Field values to replace

        Returns:
            New Document sharing this document's id
        """
        if "id" in changes:
            raise ValueError("Document id is immutable")
        changes.setdefault("modified_at", datetime.now())
        # Re-validate so tag normalization applies to the edited copy
        data = self.model_dump()
        data.update(changes)
        return Document(**data)

    def add_tag(self, tag: str) -> "Document":
        """Copy with ``tag`` appended; unchanged if already present"""
        if tag in self.tags:
            return self
        return self.with_changes(tags=self.tags + (tag,))

    def remove_tag(self, tag: str) -> "Document":
        """Copy without ``tag``"""
        if tag not in self.tags:
            return self
        return self.with_changes(tags=tuple(t for t in self.tags if t != tag))
