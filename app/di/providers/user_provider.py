from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.register_user import RegisterUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        # Register RegisterUserUseCase
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                bcrypt_rounds=get_settings().bcrypt_rounds,
            )
        )
        
        # Register ListUsersUseCase
        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )
