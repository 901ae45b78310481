"""Import-time registration of Term and the explicit create_type_registry() wiring step."""

from __future__ import annotations

import subprocess
import sys

import pytest

import reql_codec
from reql_codec import SetupError, Term, create_type_registry, get_type_id, is_opaque, type_registry


class Configured:
    pass


class AlsoConfigured:
    pass


class NeverConfigured:
    pass


class TestImportTimeRegistration:
    def test_term_is_opaque_without_explicit_registration(self):
        assert is_opaque(Term) is True
        assert type_registry.is_opaque(get_type_id(Term)) is True

    def test_first_query_in_fresh_interpreter(self):
        # Importing a submodule alone is enough: the package __init__ runs first.
        code = (
            "from reql_codec.typing import is_opaque\n"
            "from reql_codec.term.term import Term\n"
            "print(is_opaque(Term))\n"
        )
        result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)
        assert result.stdout.strip() == "True"

    def test_only_term_is_registered_at_import(self):
        code = (
            "import reql_codec\n"
            "print(sorted(reql_codec.type_registry.opaque_types, key=lambda cls: cls.__name__)[0].__name__, len(reql_codec.type_registry))\n"
        )
        result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)
        assert result.stdout.split() == ["Term", "1"]

    def test_package_exposes_module_level_registry(self):
        assert reql_codec.type_registry is type_registry


@pytest.fixture
def module_registry(monkeypatch, registry):
    """Swaps the process-wide registry for a fresh one, so create_type_registry() calls stay inside the test."""
    monkeypatch.setattr(reql_codec.typing, "type_registry", registry)
    return registry


class TestCreateTypeRegistry:
    def test_registers_declared_types(self, module_registry):
        create_type_registry(opaque_types=[Configured, AlsoConfigured])
        assert is_opaque(Configured) is True
        assert is_opaque(AlsoConfigured) is True
        assert is_opaque(NeverConfigured) is False
        assert len(module_registry) == 2

    def test_does_not_touch_other_registries(self, module_registry):
        create_type_registry(opaque_types=[Configured])
        assert type_registry.is_opaque(Configured) is False
        assert type_registry.is_opaque(Term) is True

    def test_repeated_calls_are_additive(self, module_registry):
        create_type_registry(opaque_types=[Configured])
        create_type_registry()
        assert is_opaque(Configured) is True

    def test_rejects_non_class_without_partial_registration(self, module_registry):
        with pytest.raises(SetupError):
            create_type_registry(opaque_types=[NeverConfigured, "not a class"])  # type: ignore[list-item]
        assert is_opaque(NeverConfigured) is False
        assert len(module_registry) == 0
