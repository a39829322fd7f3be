from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ChangeFrequency = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class MetadataOverride(BaseModel):
    # One admin-configured row per page path. Lookups are exact-match on path.
    path: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str | None = None
    og_image: str | None = None
    updated_at: datetime | None = None

    @field_validator("description", "og_image", mode="before")
    @classmethod
    def _blank_to_none(cls, v: object) -> object:
        """
        The admin form submits empty strings for untouched optional fields;
        store those as null so "not configured" has a single representation.
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ProductSummary(BaseModel):
    id: str
    name: str
    description: str | None = None
    images: list[str] = Field(default_factory=list)


class Category(BaseModel):
    slug: str
    name: str


class ResolvedMetadata(BaseModel):
    """
    Per-request metadata for a single page. og_image=None means the field is
    omitted and the platform layer decides what image to show.
    """

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    og_image: str | None = None


class Icon(BaseModel):
    url: str
    sizes: str
    type: str = "image/png"


class IconSet(BaseModel):
    icon: list[Icon] = Field(default_factory=list)
    apple: list[Icon] = Field(default_factory=list)


class OpenGraph(BaseModel):
    title: str
    description: str
    images: list[str] = Field(default_factory=list)
    type: str = "website"


class TwitterCard(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str
    images: list[str] = Field(default_factory=list)


class HeadMetadata(BaseModel):
    title: str
    description: str
    open_graph: OpenGraph
    twitter: TwitterCard
    icons: IconSet
    manifest: str


class SitemapEntry(BaseModel):
    url: str
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float = Field(ge=0.0, le=1.0)
