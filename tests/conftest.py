"""Shared test fixtures for renderchain."""

import io
import logging

import pytest

from renderchain.config.models import RenderChainConfig
from renderchain.context import RenderContext, reset_context
from renderchain.hooks.bus import HookBus
from renderchain.registry.registry import RendererRegistry


@pytest.fixture
def registry():
    return RendererRegistry()


@pytest.fixture
def hook_bus():
    return HookBus()


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def sample_config():
    return RenderChainConfig()


@pytest.fixture
def front_context(hook_bus, sink):
    return RenderContext(hooks=hook_bus, sink=sink, is_admin=False)


@pytest.fixture
def admin_context(hook_bus, sink):
    return RenderContext(hooks=hook_bus, sink=sink, is_admin=True)


@pytest.fixture(autouse=True)
def _clean_default_context():
    reset_context()
    yield
    reset_context()


@pytest.fixture(autouse=True)
def _restore_log_level():
    logger = logging.getLogger("renderchain")
    level = logger.level
    yield
    logger.setLevel(level)
