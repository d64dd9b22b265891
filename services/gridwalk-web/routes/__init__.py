from .auth import router as auth_router
from .connections import router as connections_router
from .leads import router as leads_router
from .os_maps import router as os_maps_router
from .projects import router as projects_router
from .tiles import router as tiles_router
from .uploads import router as uploads_router
from .workspaces import router as workspaces_router

__all__ = [
    "auth_router",
    "connections_router",
    "leads_router",
    "os_maps_router",
    "projects_router",
    "tiles_router",
    "uploads_router",
    "workspaces_router",
]
