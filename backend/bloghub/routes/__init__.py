"""
BlogHub Backend — API Routes Package
=====================================

Route Inventory:
    - users.py:       GET/POST/PATCH/DELETE  /api/users
    - categories.py:  GET/POST               /api/categories
                      PATCH/DELETE           /api/categories/{categoryId}
    - blogs.py:       GET/POST               /api/blogs
                      GET/PATCH/DELETE       /api/blogs/{blogId}
    - health.py:      GET                    /health  (outside the auth gate)

Routes stay thin: they pull identifiers from the path and query string,
hand the request's JSON reader to a service, and pick the status code.
Errors are raised by services and rendered by the handlers in main.py.
"""
