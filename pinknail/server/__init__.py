"""
Pink Nail Server Package.

This package contains the web server implementation for the Pink Nail API.
It includes the API definition, configuration, security and the service layer.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Settings, constants and JWT/password security.
    exception_handlers: Translation of domain errors into HTTP responses.
    middleware: Request timing and Logfire request logging.
    services: Business logic shared by the routers.
"""
