from .blog_controller import router as blog_router
from .user_controller import router as user_router
from .health_controller import router as health_router
from .error_handlers import register_error_handlers


__all__ = ["blog_router", "user_router", "health_router", "register_error_handlers"]
