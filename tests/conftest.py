"""Pytest fixtures for all tests."""

import pytest

from chronoid.core import registry
from chronoid.internal import logging as structured_logging
from chronoid.schemes.aid import AidGenerator
from chronoid.schemes.aidx import AidxGenerator
from chronoid.schemes.meid import MeidGenerator
from chronoid.schemes.object_id import ObjectIdGenerator
from chronoid.schemes.ulid_id import UlidGenerator


@pytest.fixture
def aid():
    """Fresh AID generator with its own counter."""
    return AidGenerator()


@pytest.fixture
def aidx():
    """Fresh AIDX generator with its own counter and node tag."""
    return AidxGenerator()


@pytest.fixture
def meid():
    return MeidGenerator()


@pytest.fixture
def object_id():
    return ObjectIdGenerator()


@pytest.fixture
def ulid_gen():
    return UlidGenerator()


@pytest.fixture
def restore_globals():
    """Put the process logger and default registry back after a test."""
    saved_logger = structured_logging._logger
    saved_registry = registry._registry
    yield
    structured_logging._logger = saved_logger
    registry._registry = saved_registry
