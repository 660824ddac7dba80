"""Configuration loader for linter settings."""

import logging
from typing import Optional

from literal_indent_linter.domain.constants import DEFAULT_MAX_PASSES


class ConfigurationLoader:
    """
    Typed view over the [tool.literal-indent] section of pyproject.toml.

    The raw section is read by the infrastructure ConfigFileLoader and
    handed in at the composition root.
    """

    def __init__(self, config: Optional[dict[str, object]] = None) -> None:
        self._config: dict[str, object] = dict(config or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values."""
        max_passes = config.get("max_passes", config.get("max-passes"))
        if max_passes is not None and (
            isinstance(max_passes, bool) or not isinstance(max_passes, int) or max_passes < 1
        ):
            logging.warning(
                "Configuration Warning: 'max_passes' must be a positive integer, got %r. "
                "Falling back to %d.", max_passes, DEFAULT_MAX_PASSES,
            )

        exclude = config.get("exclude")
        if exclude is not None and not isinstance(exclude, list):
            logging.warning("Configuration Warning: 'exclude' must be a list of glob patterns.")

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def max_passes(self) -> int:
        """Upper bound on correction passes per file."""
        raw = self._config.get("max_passes", self._config.get("max-passes", DEFAULT_MAX_PASSES))
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 1:
            return DEFAULT_MAX_PASSES
        return raw

    @property
    def exclude(self) -> list[str]:
        """Glob patterns of files the CLI skips."""
        raw = self._config.get("exclude", [])
        if not isinstance(raw, list):
            return []
        return [item for item in raw if isinstance(item, str)]
