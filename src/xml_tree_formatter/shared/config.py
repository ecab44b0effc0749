"""Configuration classes for XML tree formatting.

This module provides configuration objects for the parser engine, the string
formatter, the tree builder and process-wide settings.
"""

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_ENTITY_MODES = ["internal"]

_SECTIONS = ["engine", "formatter", "tree", "global_"]


@dataclass
class ParserEngineConfig:
    """Configuration for the underlying lxml parser engine."""

    # False: strict parser that raises on malformed input.
    # True: recovering parser that records errors in its error log.
    recover: bool = False
    # "internal": expand entities declared in the internal DTD subset only.
    resolve_entities: Union[bool, str] = "internal"
    # Lifts libxml2's nesting depth and text node size limits.
    huge_tree: bool = True
    remove_blank_text: bool = False

    def __post_init__(self) -> None:
        """Validate engine configuration."""
        for name in ("recover", "huge_tree", "remove_blank_text"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")
        if (
            not isinstance(self.resolve_entities, bool)
            and self.resolve_entities not in VALID_ENTITY_MODES
        ):
            raise ValueError(
                f"resolve_entities must be a boolean or one of {VALID_ENTITY_MODES}"
            )


@dataclass
class FormatterConfig:
    """Configuration for the canonical string formatter."""

    indent: str = "  "
    keep_mixed_text: bool = False

    def __post_init__(self) -> None:
        """Validate formatter configuration."""
        if self.indent.strip():
            raise ValueError("indent must contain only whitespace")


@dataclass
class TreeConfig:
    """Configuration for the node tree builder."""

    root_id: str = "root"
    id_separator: str = "-"

    def __post_init__(self) -> None:
        """Validate tree configuration."""
        if not self.root_id:
            raise ValueError("root_id cannot be empty")
        if not self.id_separator:
            raise ValueError("id_separator cannot be empty")
        # Digits in the separator would make child paths ambiguous.
        if any(ch.isdigit() for ch in self.id_separator):
            raise ValueError("id_separator cannot contain digits")


@dataclass
class GlobalConfig:
    """Settings that apply across all components."""

    logging_level: str = "WARNING"
    max_input_size_bytes: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate global configuration."""
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ValueError(f"logging_level must be one of {VALID_LOGGING_LEVELS}")
        if self.max_input_size_bytes is not None and self.max_input_size_bytes <= 0:
            raise ValueError("max_input_size_bytes must be > 0 or None")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class Config:
    """Complete configuration for parse, format and tree building.

    Immutable once constructed; use ``override`` to derive a modified copy.
    """

    engine: ParserEngineConfig = field(default_factory=ParserEngineConfig)
    formatter: FormatterConfig = field(default_factory=FormatterConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.engine.__post_init__()
            self.formatter.__post_init__()
            self.tree.__post_init__()
            self.global_.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "Config":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Section-qualified fields, e.g. ``formatter__indent="    "``

        Returns:
            New Config instance with overrides applied

        Example:
            >>> config = Config().override(engine__recover=True)
            >>> config.engine.recover
            True
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        for key, value in kwargs.items():
            # "global___max_input_size_bytes" belongs to the "global_" section.
            section = next(
                (name for name in _SECTIONS if key.startswith(f"{name}__")), None
            )
            if section is None:
                raise ConfigValidationError(
                    f"Override '{key}' must be qualified with a known section",
                    field_name=key,
                    suggestions=[f"{name}__<field>" for name in _SECTIONS],
                )
            field_name = key[len(section) + 2:]
            nested_overrides.setdefault(section, {})[field_name] = value

        new_fields = {}
        for section in _SECTIONS:
            current = getattr(self, section)
            if section in nested_overrides:
                try:
                    new_fields[section] = replace(current, **nested_overrides[section])
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=section) from e
            else:
                new_fields[section] = current

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            section: dict(vars(getattr(self, section)))
            for section in _SECTIONS
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary.

        Unknown sections are rejected; missing sections use their defaults.
        """
        section_types = {
            "engine": ParserEngineConfig,
            "formatter": FormatterConfig,
            "tree": TreeConfig,
            "global_": GlobalConfig,
        }

        unknown = set(data) - set(section_types)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration sections: {sorted(unknown)}",
                suggestions=_SECTIONS,
            )

        sections = {}
        for name, section_type in section_types.items():
            values = data.get(name, {})
            try:
                sections[name] = section_type(**values)
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(str(e), field_name=name) from e

        return cls(**sections)

    @classmethod
    def from_json(cls, json_str: str) -> "Config":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """Load configuration from a JSON file."""
        path_obj = Path(path)
        try:
            content = path_obj.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read configuration file {path_obj}: {e}") from e
        return cls.from_json(content)
