# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, Response, status

# Local application imports
from ...application.dto.blog_dto import BlogRequest, BlogResponse, BlogStatsResponse
from ...application.use_cases.blog import (
    ListBlogsUseCase,
    GetBlogUseCase,
    CreateBlogUseCase,
    UpdateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogStatsUseCase,
)
from ...di.container import get_container
from ...domain.exceptions import NotFoundError, StorageUnavailableError, ValidationError


router = APIRouter(tags=["blogs"])


def _storage_unavailable(exception: StorageUnavailableError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=str(exception)
    )


@router.get("", response_model=List[BlogResponse])
async def list_blogs() -> List[BlogResponse]:
    """
    List all blogs
    
    Returns:
        List of BlogResponse objects
    """
    container = get_container()
    list_blogs_use_case = container.get(ListBlogsUseCase)
    
    try:
        return await list_blogs_use_case.execute()
    except StorageUnavailableError as exception:
        raise _storage_unavailable(exception)


@router.get("/stats", response_model=BlogStatsResponse)
async def get_blog_stats() -> BlogStatsResponse:
    """
    Total likes and the favorite blog across all blogs
    
    Returns:
        BlogStatsResponse; favorite is null when there are no blogs
    """
    container = get_container()
    stats_use_case = container.get(GetBlogStatsUseCase)
    
    try:
        return await stats_use_case.execute()
    except StorageUnavailableError as exception:
        raise _storage_unavailable(exception)


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str) -> BlogResponse:
    """
    Get a blog by ID
    
    Args:
        blog_id: ID of the blog
        
    Returns:
        BlogResponse with blog information
    """
    container = get_container()
    get_blog_use_case = container.get(GetBlogUseCase)
    
    try:
        return await get_blog_use_case.execute(blog_id)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except StorageUnavailableError as exception:
        raise _storage_unavailable(exception)


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(request: BlogRequest) -> BlogResponse:
    """
    Create a new blog
    
    Args:
        request: Blog creation request
        
    Returns:
        BlogResponse with created blog information
    """
    container = get_container()
    create_blog_use_case = container.get(CreateBlogUseCase)
    
    try:
        return await create_blog_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except StorageUnavailableError as exception:
        raise _storage_unavailable(exception)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(blog_id: str, request: BlogRequest) -> BlogResponse:
    """
    Replace the fields of an existing blog
    
    Args:
        blog_id: ID of the blog
        request: New blog fields
        
    Returns:
        BlogResponse with the updated blog
    """
    container = get_container()
    update_blog_use_case = container.get(UpdateBlogUseCase)
    
    try:
        return await update_blog_use_case.execute(blog_id, request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exception)
        )
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except StorageUnavailableError as exception:
        raise _storage_unavailable(exception)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: str) -> Response:
    """
    Delete a blog by ID
    
    Args:
        blog_id: ID of the blog
    """
    container = get_container()
    delete_blog_use_case = container.get(DeleteBlogUseCase)
    
    try:
        await delete_blog_use_case.execute(blog_id)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )
    except StorageUnavailableError as exception:
        raise _storage_unavailable(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
