"""
Fixtures for API tests: the real app wired to in-memory repositories.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.user.register_user import RegisterUserUseCase
from app.di.base_container import BaseContainer
from app.di.providers import BlogProvider, UserProvider
from app.domain.repositories.blog_repository import BlogRepository
from app.domain.repositories.user_repository import UserRepository
from tests.conftest import TEST_BCRYPT_ROUNDS


@pytest.fixture
def test_container(blog_repo, user_repo):
    """Container with the production use case providers over fake repositories."""
    container = BaseContainer()
    container.register_singleton(BlogRepository, blog_repo)
    container.register_singleton(UserRepository, user_repo)
    BlogProvider.register(container)
    UserProvider.register(container)
    container.register_factory(
        RegisterUserUseCase,
        lambda: RegisterUserUseCase(
            user_repository=container.get(UserRepository),
            bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        )
    )
    return container


@pytest.fixture
def client(test_container):
    """
    Create test client with the fake-backed container.
    
    The client is not used as a context manager, so the lifespan hook
    (index creation against a real MongoDB) does not run.
    """
    from app.main import app

    with patch("app.api.v1.blog_controller.get_container", return_value=test_container), patch(
        "app.api.v1.user_controller.get_container", return_value=test_container
    ):
        yield TestClient(app)
