from .auth import router as auth_router
from .users import router as users_router
from .units import router as units_router
from .payments import router as payments_router
from .chats import router as chats_router

__all__ = [
     "auth_router",
     "users_router",
     "units_router",
     "payments_router",
     "chats_router",
]
