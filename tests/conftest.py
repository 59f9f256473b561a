"""
Shared pytest fixtures for blog list tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from app.core.security import hash_password
from app.domain.models.blog import Blog
from app.domain.models.user import User
from tests.fakes import InMemoryBlogRepository, InMemoryUserRepository

# Lowest cost bcrypt accepts; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4

INITIAL_BLOGS = [
    {
        "title": "JavaScript 101",
        "author": "Nisio Isin",
        "url": "21stjumpstreet.gov",
        "likes": 450,
    },
    {
        "title": "Jave 1322",
        "author": "Hirohiko Araki",
        "url": "ooprinciples.net",
        "likes": 67,
    },
]


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_bloglist",
        "BCRYPT_ROUNDS": str(TEST_BCRYPT_ROUNDS),
        "LOG_LEVEL": "debug",
        "CORS_ORIGINS": "http://localhost:5173, http://localhost:3000",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_bloglist"
    mock.mongo_timeout_ms = 1000
    mock.bcrypt_rounds = TEST_BCRYPT_ROUNDS
    mock.log_level = "DEBUG"
    mock.cors_origins = ["*"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("app.core.config.get_settings", return_value=mock), patch(
        "app.core.security.get_settings", return_value=mock
    ), patch(
        "app.application.use_cases.user.register_user.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def blog_repo():
    """In-memory blog store seeded with the two initial blogs."""
    repo = InMemoryBlogRepository()
    for blog in INITIAL_BLOGS:
        repo.add(Blog(id=None, **blog))
    return repo


@pytest.fixture
def user_repo():
    """In-memory user store seeded with a single 'root' user."""
    repo = InMemoryUserRepository()
    root = User(
        id=None,
        username="root",
        password_hash=hash_password("sekret", rounds=TEST_BCRYPT_ROUNDS),
    )
    repo.add(root)
    return repo
