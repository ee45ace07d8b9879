"""Data models for the load, parse and collection pipeline"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_serializer, field_validator

from mdblog.errors import ContentError


@dataclass(frozen=True)
class RawSource:
    """One file as read by the loader: relative path and decoded text."""
    path: str           # POSIX path relative to the content root
    text: str


class Metadata(BaseModel):
    """Validated front matter: recognized keys plus open-ended params."""
    model_config = ConfigDict(frozen=True)

    title:  str
    date:   AwareDatetime
    draft:  bool = False
    math:   bool = False
    slug:   Optional[str] = None
    params: dict[str, Any] = Field(default_factory=dict)   # unrecognized keys, source order

    def to_frontmatter(self) -> dict[str, Any]:
        """Return the mapping that serializes back to this metadata."""
        data: dict[str, Any] = {"title": self.title, "date": self.date}
        if self.draft:
            data["draft"] = True
        if self.math:
            data["math"] = True
        if self.slug is not None:
            data["slug"] = self.slug
        data.update(self.params)
        return data


class Document(BaseModel):
    """A parsed post. Immutable; a reload builds a new instance."""
    model_config = ConfigDict(frozen=True)

    path:         str
    title:        str = Field(..., min_length=1)
    date:         AwareDatetime
    draft:        bool = False
    math_enabled: bool = False
    body:         str = ""
    params:       Mapping[str, Any] = Field(default_factory=dict, validate_default=True)   # read-only
    slug:         str
    summary:      str = ""
    word_count:   int = Field(default=0, ge=0)
    hash:         str = ""          # sha256 of the raw source text

    @field_validator("params", mode="after")
    @classmethod
    def _freeze_params(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    @field_serializer("params")
    def _dump_params(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return dict(v)

    def __hash__(self) -> int:
        return hash((self.path, self.date, self.hash))

    def sort_key(self) -> tuple[float, str]:
        """Newest first, then path ascending."""
        return (-self.date.timestamp(), self.path)

    def __lt__(self, other: "Document") -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def metadata(self) -> Metadata:
        return Metadata(
            title=self.title,
            date=self.date,
            draft=self.draft,
            math=self.math_enabled,
            slug=self.slug,
            params=dict(self.params),
        )


class CollectionConfig(BaseModel):
    """Filtering options applied when building a published collection."""
    include_drafts: bool = False
    include_future: bool = True
    now:            Optional[datetime] = None   # reference time for include_future; UTC now when None


@dataclass
class LoadResult:
    """Partial-success load: parsed documents plus per-document errors."""
    documents: list[Document] = field(default_factory=list)
    errors:    list[ContentError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
