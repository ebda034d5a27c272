"""Presentation layer - FastAPI routers, middleware and RFC 7807 errors.

Routers validate input with Pydantic schemas, dispatch commands and queries
through the mediator, and translate Result failures to problem responses.
"""
