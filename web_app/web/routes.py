"""Root-path routes: create from a bare or JSON body, and redirect."""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from shortlink.errors import MalformedInput
from ..api.routes import mapping_response
from ..api.schemas import ShortenRequest, MappingResponse

router = APIRouter()


def _is_json(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() == "application/json"


async def _parse_create_body(request: Request):
    """Return (destination, requested_slug) from either supported encoding."""
    raw = await request.body()

    if _is_json(request):
        try:
            payload = ShortenRequest.model_validate_json(raw)
        except ValidationError as e:
            first = e.errors()[0]
            raise MalformedInput(f"Error parsing json: {first['msg']}")
        return payload.url, payload.slug

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise MalformedInput("Request body must be UTF-8 text")
    return text.strip(), None


# Registered before the catch-all slug route
@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    if health["overall"]:
        return {"status": "healthy"}
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )


@router.post(
    "/",
    response_model=MappingResponse,
    summary="Create short URL from raw body",
    description=(
        "Send the destination as a plain-text body, or send "
        '`{"url": ..., "slug": ...}` with `Content-Type: application/json`.'
    ),
)
async def create_from_body(request: Request):
    """Create a mapping from a bare URL body or a JSON payload."""
    service = request.app.state.service

    destination, requested_slug = await _parse_create_body(request)

    mapping = await service.create_mapping(
        destination=destination,
        requested_slug=requested_slug,
        creator_address=request.state.client_address,
    )
    return mapping_response(request, mapping)


@router.get("/{slug}", include_in_schema=False)
async def redirect_to_url(request: Request, slug: str):
    """Redirect to the destination URL, counting the usage."""
    service = request.app.state.service
    config = request.app.state.config

    destination = await service.resolve(slug)

    return RedirectResponse(url=destination, status_code=config.redirect_status_code)
