import logging
from datetime import datetime

import pytest

from creational_patterns.application.abstract_factory.service import AbstractFactoryApplicationService
from creational_patterns.application.factory_method.service import FactoryMethodApplicationService
from creational_patterns.application.prototype.service import PrototypeApplicationService
from creational_patterns.domain.prototype.prototype import Prototype
from creational_patterns.infrastructure.registry.creator_registry import get_creator_registry
from creational_patterns.infrastructure.registry.factory_registry import get_factory_registry
from creational_patterns.infrastructure.registry.registration import register_default_variants

CONFIG_ENV_VARS = [
    "LOG_LEVEL",
    "LOG_DESTINATION",
    "LOG_JSON",
    "PATTERNS_LOGDIR",
    "PATTERNS_CONFIG_FILE",
    "PATTERNS_OUTPUT_FORMAT",
    "PROTOTYPE_PRIMITIVE",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration env vars of the host out of the tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def default_registries():
    """Start every test with exactly the built-in variants registered."""
    get_factory_registry().clear_registrations()
    get_creator_registry().clear_registrations()
    register_default_variants()
    yield
    get_factory_registry().clear_registrations()
    get_creator_registry().clear_registrations()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they never outlive a test."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if type(handler).__module__.startswith("_pytest"):
            continue
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def prototype():
    return Prototype(245, datetime(2024, 5, 17, 12, 30, 0))


@pytest.fixture
def prototype_service():
    return PrototypeApplicationService()


@pytest.fixture
def abstract_factory_service():
    return AbstractFactoryApplicationService()


@pytest.fixture
def factory_method_service():
    return FactoryMethodApplicationService()
