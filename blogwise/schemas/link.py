"""Internal link schemas."""

from pydantic import BaseModel, ConfigDict, Field

from blogwise.services.types import InternalLink


class RelatedLinksRequest(BaseModel):
    keyword: str = Field(min_length=1, max_length=200)
    category_id: str | None = None
    exclude_slug: str | None = None
    limit: int = Field(default=5, ge=1, le=20)


class InternalLinkResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    content_id: str
    title: str
    slug: str
    relevance_score: int = Field(default=0, ge=0)

    def to_link(self) -> InternalLink:
        return InternalLink(
            content_id=self.content_id,
            title=self.title,
            slug=self.slug,
            relevance_score=self.relevance_score,
        )


class RelatedLinksResponse(BaseModel):
    items: list[InternalLinkResponse]


class InjectLinksRequest(BaseModel):
    markdown: str
    links: list[InternalLinkResponse] = Field(default_factory=list)


class InjectLinksResponse(BaseModel):
    markdown: str
