import pytest

from reql_codec import TypeRegistry


@pytest.fixture
def registry() -> TypeRegistry:
    """A fresh, empty registry so tests never leak registrations into the process-wide one."""
    return TypeRegistry()
