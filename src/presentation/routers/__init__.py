"""External-facing routers (non-versioned endpoints).

Routes that are not part of the versioned API contract, such as the root
and liveness endpoints.
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
