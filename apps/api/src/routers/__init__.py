from .citizens import router as citizens_router

ROUTERS = (citizens_router,)

__all__ = [
    "ROUTERS",
    "citizens_router",
]
