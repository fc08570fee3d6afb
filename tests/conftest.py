"""
Shared pytest fixtures for ton_app tests.
"""
import os
import time
from unittest.mock import patch

import pytest

from fakes import FakeClock, InMemoryCollection

from ton_app.core.config import Settings
from ton_app.core.security import PasswordHasher, TokenIssuer
from ton_app.di.base_container import BaseContainer
from ton_app.di.providers import AuthProvider, ProductProvider, RepositoryProvider, SecurityProvider
from ton_app.infrastructure.db.mongo_product_repository import MongoProductRepository
from ton_app.infrastructure.db.mongo_user_repository import MongoUserRepository

TEST_JWT_SECRET = "test_jwt_secret_key_for_testing_only_0123456789"


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_ton_db",
        "TABLE_NAME": "ton-app-test",
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
        "ACCESS_TOKEN_EXPIRE_MINUTES": "60",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "WARNING",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def test_settings(mock_env):
    """Settings built from the test environment."""
    return Settings()


@pytest.fixture
def hasher():
    """Cheapest bcrypt cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def clock():
    return FakeClock(now=time.time())


@pytest.fixture
def issuer(clock):
    return TokenIssuer(secret_key=TEST_JWT_SECRET, expire_minutes=60, clock=clock)


@pytest.fixture
def table():
    """The single table, held in memory."""
    return InMemoryCollection(name="ton-app-test")


@pytest.fixture
def user_repository(table):
    return MongoUserRepository(table_collection=table)


@pytest.fixture
def product_repository(table):
    return MongoProductRepository(table_collection=table)


@pytest.fixture
def app_container(test_settings, table, hasher, issuer):
    """
    Container wired like DIContainer, but over the in-memory table and
    with a fast hasher and a controllable token clock.
    """
    container = BaseContainer()
    container.register_singleton("table_collection", table)
    RepositoryProvider.register(container, test_settings)
    SecurityProvider.register(container, test_settings)
    container.register_singleton(PasswordHasher, hasher)
    container.register_singleton(TokenIssuer, issuer)
    AuthProvider.register(container)
    ProductProvider.register(container)
    return container
