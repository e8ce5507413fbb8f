from chat.presentation.api.routers.store import router as store_router

__all__ = [
    "store_router",
]
