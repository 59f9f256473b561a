from .config import Settings, get_settings
from .security import hash_password

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
]
