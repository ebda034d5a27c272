"""Test suite for the properties API.

- unit/: Handlers, services and adapters with mocked collaborators
- integration/: Repositories and workflows against a fresh SQLite database
- api/: HTTP endpoints through the FastAPI app with a stubbed mediator
"""
