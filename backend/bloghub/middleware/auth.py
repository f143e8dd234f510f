"""
BlogHub Backend — Auth Gate Middleware
=======================================

What:  Rejects API requests that carry no acceptable bearer token.
How:   For paths under the API prefix, takes the text after the literal
       "Bearer " prefix of the Authorization header and asks the configured
       TokenVerifier about it. Failures answer 401 {"message": "Unauthorized"}
       without calling the route, so the store is never touched.
When:  Innermost middleware; runs right before routing.

Paths outside the prefix (/health, /docs, static assets) bypass the gate.
"""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from bloghub.config import settings
from bloghub.exceptions import UnauthorizedError
from bloghub.services.token_verifier import AcceptAnyTokenVerifier, TokenVerifier

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Returns the token following "Bearer ", or None when the header is absent
    or uses another scheme. "Bearer " with nothing after it yields "".
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):].strip()


class AuthGateMiddleware(BaseHTTPMiddleware):

    def __init__(
        self,
        app,
        verifier: Optional[TokenVerifier] = None,
        prefix: Optional[str] = None,
    ):
        super().__init__(app)
        self.verifier = verifier or AcceptAnyTokenVerifier()
        self.prefix = prefix or settings.api_prefix

    def _protects(self, path: str) -> bool:
        return path == self.prefix or path.startswith(self.prefix + "/")

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._protects(request.url.path):
            return await call_next(request)

        token = extract_bearer_token(request.headers.get("Authorization"))
        if not token or not await self.verifier.verify(token):
            error = UnauthorizedError()
            logger.warning(
                "Rejected %s %s: %s bearer token",
                request.method,
                request.url.path,
                "missing" if not token else "invalid",
            )
            return JSONResponse(status_code=401, content={"message": error.message})

        return await call_next(request)
