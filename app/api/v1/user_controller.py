# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.user_dto import UserRegistrationRequest, UserResponse
from ...application.use_cases.user.register_user import RegisterUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...di.container import get_container
from ...domain.exceptions import StorageUnavailableError, ValidationError


router = APIRouter(tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user
    
    Args:
        request: User registration request
        
    Returns:
        UserResponse with created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    
    try:
        return await register_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except StorageUnavailableError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """
    List all users
    
    Returns:
        List of UserResponse objects (no password hashes)
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    try:
        return await list_users_use_case.execute()
    except StorageUnavailableError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exception)
        )
