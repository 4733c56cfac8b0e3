"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortlink.common.headers import get_client_address


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Resolve the caller's address once per request."""

    def __init__(self, app, trust_forwarded: bool = True):
        super().__init__(app)
        self.trust_forwarded = trust_forwarded

    async def dispatch(self, request: Request, call_next: Callable):
        """Store the client address in request state."""
        peer = request.client.host if request.client else None
        request.state.client_address = get_client_address(
            headers=dict(request.headers),
            peer_address=peer,
            trust_forwarded=self.trust_forwarded,
        )

        return await call_next(request)
