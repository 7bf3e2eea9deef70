"""Pink Nail API.

This package contains the backend service of the Pink Nail salon website. It
persists the data shown on the public customer site and edited from the admin
dashboard.

High-level architecture
-----------------------

The codebase is organized in two layers:

- ``pinknail.core``: framework-free building blocks.

  - SQLModel entities and async repositories (``core.database``).
  - Pydantic I/O models that define the JSON contract (``core.models.io``).
  - Domain enums and exceptions, logging and Logfire monitoring.

- ``pinknail.server``: the FastAPI application.

  - Versioned routers under ``/api/v1`` (``server.api.v1``).
  - Service classes that hold business rules such as time-slot availability,
    slug generation and singleton resources (``server.services``).
  - Settings, JWT security, middleware and exception handlers.

Typical request flow
--------------------

1. A router validates the request body against an I/O model.
2. The router resolves a service through a FastAPI dependency.
3. The service applies business rules and talks to one or more repositories.
4. Domain failures are raised as ``PinkNailError`` subclasses and turned into
   HTTP responses by the registered exception handlers.
"""
