"""
JuiceBox Factory Server Package.

This package contains the web server implementation for JuiceBox Factory.
It includes the API definition, configuration, dependency wiring, middleware
and exception handlers.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and static constants.
    services: Dependency providers for engines and services.
    middleware: Request tracing middleware.
    exception_handlers: Error-to-response mapping.
"""
