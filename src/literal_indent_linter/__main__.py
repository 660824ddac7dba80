"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from literal_indent_linter.infrastructure.di.container import LinterContainer
from literal_indent_linter.interface.cli import CLIDependencies, create_app


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = LinterContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        structure_gateway=container.get_structure_gateway(),
        filesystem=container.get_filesystem_gateway(),
        suppression=container.get_suppression_service(),
        reporter=container.get_reporter("table"),
        json_reporter=container.get_reporter("json"),
    )

    app = create_app(deps)
    app()


if __name__ == "__main__":
    main()
