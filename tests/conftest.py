"""Shared pytest fixtures for Quill tests."""

import os

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from quill.core.config import get_config
from quill.core.names import ClassName
from quill.writer import ClassWriter

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch):
    """Render with default settings regardless of the developer's environment."""
    for key in list(os.environ):
        if key.startswith("QUILL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def outer_name() -> ClassName:
    """Provide the name of a top-level class in package ``p``."""
    return ClassName.from_parts("p", "Outer")


@pytest.fixture
def outer(outer_name: ClassName) -> ClassWriter:
    """Provide an empty public top-level class writer."""
    writer = ClassWriter(outer_name)
    writer.add_modifiers("public")
    return writer
