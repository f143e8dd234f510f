"""
BlogHub Backend — Bearer Token Verification Interface
=======================================================

What:  Abstract contract for deciding whether a bearer token is acceptable.
Why:   The auth gate only extracts the token; what counts as valid is a
       separate, swappable policy (signature check, token registry, ...).
How:   Concrete verifiers inherit from TokenVerifier and implement verify().
Who:   Called by AuthGateMiddleware for every request under the API prefix.

Implementations:
    - AcceptAnyTokenVerifier: every non-empty token passes. This is a
      placeholder, not a security model; it is the default.
    - StaticTokenVerifier: tokens must belong to a configured set (tests and
      simple deployments).
"""

from abc import ABC, abstractmethod
from typing import Iterable


class TokenVerifier(ABC):
    """
    Contract:
        - verify() receives the token text after "Bearer " (never empty;
          the gate rejects empty tokens before calling it)
        - returns True to let the request through, False to answer 401
        - must not raise for ordinary invalid tokens
    """

    @abstractmethod
    async def verify(self, token: str) -> bool:
        ...


class AcceptAnyTokenVerifier(TokenVerifier):
    """Accepts every non-empty token."""

    async def verify(self, token: str) -> bool:
        return bool(token)


class StaticTokenVerifier(TokenVerifier):
    """Accepts only tokens from a fixed set."""

    def __init__(self, tokens: Iterable[str]):
        self._tokens = frozenset(tokens)

    async def verify(self, token: str) -> bool:
        return token in self._tokens
