"""Internal link endpoints."""

from fastapi import APIRouter

from blogwise.api.v1.dependencies import Store
from blogwise.schemas.link import (
    InjectLinksRequest,
    InjectLinksResponse,
    InternalLinkResponse,
    RelatedLinksRequest,
    RelatedLinksResponse,
)
from blogwise.services.internal_links import find_related_links, inject_links

router = APIRouter()


@router.post("/related", response_model=RelatedLinksResponse)
async def related_links(request: RelatedLinksRequest, store: Store) -> RelatedLinksResponse:
    links = await find_related_links(
        store,
        request.keyword,
        request.category_id,
        exclude_slug=request.exclude_slug,
        limit=request.limit,
    )
    return RelatedLinksResponse(items=[InternalLinkResponse.model_validate(link) for link in links])


@router.post("/inject", response_model=InjectLinksResponse)
async def inject(request: InjectLinksRequest) -> InjectLinksResponse:
    """Insert related-content blocks into markdown."""
    return InjectLinksResponse(
        markdown=inject_links(request.markdown, [link.to_link() for link in request.links])
    )
