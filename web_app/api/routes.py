"""API routes implementation."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    MappingResponse,
    HealthResponse,
    ErrorResponse,
)
from shortlink.common.url_builder import build_short_url
from shortlink.common.headers import build_base_url
from shortlink.database.models import UrlMapping

router = APIRouter()


def mapping_response(request: Request, mapping: UrlMapping) -> MappingResponse:
    """Wrap a mapping with the short URL a caller should hand out."""
    config = request.app.state.config

    base_url = build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )
    short_url = build_short_url(
        slug=mapping.slug,
        base_url=base_url,
        path_prefix=config.path_prefix,
    )
    return MappingResponse.from_mapping(mapping, short_url)


@router.post(
    "/shorten",
    response_model=MappingResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request"},
        408: {"model": ErrorResponse, "description": "No free slug found, retry later"},
        409: {"model": ErrorResponse, "description": "Slug already in use"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Optionally provide your own slug.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL from a structured payload."""
    service = request.app.state.service

    mapping = await service.create_mapping(
        destination=body.url,
        requested_slug=body.slug,
        creator_address=request.state.client_address,
    )
    return mapping_response(request, mapping)


@router.get(
    "/urls/{slug}",
    response_model=MappingResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Slug not found"},
    },
    summary="Get mapping information",
    description="Get a mapping including its usage count. Does not count as a usage.",
)
async def get_url_info(request: Request, slug: str):
    """Get information about a shortened URL."""
    service = request.app.state.service

    mapping = await service.get_mapping(slug)
    return mapping_response(request, mapping)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
