# API endpoints and routers

from .translation_endpoints import router as translation_router
from .notification_endpoints import router as notification_router
from .auth_endpoints import router as auth_router
from .service_worker_endpoints import router as service_worker_router

__all__ = [
    "translation_router",
    "notification_router",
    "auth_router",
    "service_worker_router",
]
