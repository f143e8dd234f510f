"""
BlogHub Backend — Application Package Initializer
==================================================

What: Marks the `bloghub` directory as a Python package.
Why:  Enables module imports like `from bloghub.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows the same layering for every resource:

    ┌─────────────────────────────────────┐
    │        Auth Gate (Middleware)       │  ← Bearer token check on /api/*
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← Path/query extraction, status codes
    ├─────────────────────────────────────┤
    │  Services (Ownership + Store Ops)   │  ← Identifier checks, one store call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │          Store (Persistence)        │  ← Lazy async engine, session per request
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
