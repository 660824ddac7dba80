from typing import TYPE_CHECKING, Any, Optional, cast

from literal_indent_linter.domain.config import ConfigurationLoader
from literal_indent_linter.infrastructure.config_file_loader import ConfigFileLoader
from literal_indent_linter.infrastructure.gateways.astroid_gateway import AstroidStructureGateway
from literal_indent_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from literal_indent_linter.infrastructure.services.suppression import DirectiveSuppressionService
from literal_indent_linter.interface.reporters import JsonReporter, TerminalReporter
from literal_indent_linter.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from literal_indent_linter.domain.protocols import (
        FileSystemProtocol,
        ModuleStructureProtocol,
        SuppressionProtocol,
        TelemetryPort,
    )
    from literal_indent_linter.interface.reporters import ViolationReporter


class LinterContainer:
    """Dependency Injection Container for the literal indentation linter."""

    _instance: Optional["LinterContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("LITERAL-INDENT", "cyan", "Bracket alignment online")
        self.register_singleton("TelemetryPort", telemetry)
        structure_gateway = AstroidStructureGateway()
        self.register_singleton("AstroidStructureGateway", structure_gateway)
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("SuppressionService", DirectiveSuppressionService(structure_gateway))

        # Interface
        self.register_singleton("TerminalReporter", TerminalReporter())
        self.register_singleton("JsonReporter", JsonReporter())

    # JUSTIFICATION: DI Container must handle any type of service
    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    # JUSTIFICATION: DI Container must return any type of service
    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_structure_gateway(self) -> "ModuleStructureProtocol":
        """Return the astroid structure gateway."""
        return cast("ModuleStructureProtocol", self.get("AstroidStructureGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_suppression_service(self) -> "SuppressionProtocol":
        """Return the suppression directive service."""
        return cast("SuppressionProtocol", self.get("SuppressionService"))

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_reporter(self, output_format: str = "table") -> "ViolationReporter":
        """Return the reporter for the requested output format."""
        key = "JsonReporter" if output_format == "json" else "TerminalReporter"
        return cast("ViolationReporter", self.get(key))

    @classmethod
    def get_instance(cls) -> "LinterContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = LinterContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
