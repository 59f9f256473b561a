# Standard library imports
import logging
from functools import partial
from typing import Callable, Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.validation import validate_new_user
from ....core.config import get_settings
from ....core.security import hash_password
from ...dto.user_dto import UserRegistrationRequest, UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: Callable[[str, int], str] = hash_password,
        bcrypt_rounds: Optional[int] = None,
    ) -> None:
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.bcrypt_rounds = bcrypt_rounds if bcrypt_rounds is not None else get_settings().bcrypt_rounds
    
    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user
        
        Args:
            request: Registration request with username, name and password
            
        Returns:
            UserResponse with created user information
            
        Raises:
            ValidationError: If password or username break a rule
            UniquenessError: If the username is already taken
        """
        new_user = validate_new_user(
            request.model_dump(),
            hasher=partial(self.password_hasher, rounds=self.bcrypt_rounds),
        )
        
        # Uniqueness is enforced by the store's unique index on insert
        saved_user = await self.user_repository.insert(new_user)
        logger.info(f"Registered user {saved_user.id} ({saved_user.username})")
        
        return UserResponse(
            id=saved_user.id or "",
            username=saved_user.username,
            name=saved_user.name,
        )
