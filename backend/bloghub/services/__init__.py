"""
BlogHub Backend — Services Layer
=================================

What:  Everything between the HTTP layer and the store.
How:   Routes extract identifiers and hand them to a service; the service runs
       the ownership checks, parses the body, performs one store operation and
       translates failures into application exceptions.

Service Inventory:
    - ownership:       identifier validator and scoped existence checks
    - listing:         pagination, keyword and creation-date filters
    - UserService:     list / create / update username / delete
    - CategoryService: list / create / update / delete, scoped to a user
    - BlogService:     list / create / get / update / delete, scoped to user + category
    - TokenVerifier:   pluggable bearer-token check used by the auth gate
"""

from typing import Any, Awaitable, Callable

# Deferred JSON body parser handed in by routes, e.g. `request.json`; awaited
# only after the ownership checks pass.
BodyReader = Callable[[], Awaitable[Any]]
