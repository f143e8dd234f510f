"""
BlogHub Backend — Pydantic Request/Response Schemas
=====================================================

What:  The API contract: request payloads, document representations and
       response envelopes.
How:   Documents serialize with the store's field names (`_id`, `createdAt`,
       `updatedAt`, `user`, `category`) through field aliases, while
       Python code keeps snake_case attribute names.
"""
