"""
BlogHub Backend — Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [CORS] → [Request ID] → [Logging] → [GZip] → [Auth Gate] → Route Handler

    1. CORS first: preflight OPTIONS requests are answered before the gate
    2. Request ID: correlation ID for logs and the X-Request-ID header
    3. Logging: one access line per request, including 401s from the gate
    4. Auth Gate last: only /api/* requests with a bearer token reach handlers
"""
