"""Pytest configuration and shared fixtures.

Run pytest from this project's root; pythonpath in pyproject.toml puts
src/ and the project root on sys.path so `tests.unit...` helpers import.
"""

from unittest.mock import MagicMock

import pytest

from literal_indent_linter.domain.config import ConfigurationLoader
from literal_indent_linter.infrastructure.gateways.astroid_gateway import AstroidStructureGateway
from literal_indent_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


def use_case_required_deps(**overrides: object) -> dict[str, object]:
    """Return dependencies for the file-level use cases. Pass overrides to customize."""
    base: dict[str, object] = {
        "structure_provider": AstroidStructureGateway(),
        "filesystem": FileSystemGateway(),
        "telemetry": MagicMock(),
        "config_loader": ConfigurationLoader(),
    }
    base.update(overrides)
    return base


@pytest.fixture
def structure_gateway() -> AstroidStructureGateway:
    return AstroidStructureGateway()


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()
