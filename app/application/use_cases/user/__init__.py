from .register_user import RegisterUserUseCase
from .list_users import ListUsersUseCase

__all__ = ["RegisterUserUseCase", "ListUsersUseCase"]
