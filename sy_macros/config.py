"""
Configuration management for SyMacros.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Any, Tuple
from dataclasses import dataclass, field, fields, replace
from enum import Enum

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    """Log levels supported by the engine."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


@dataclass(frozen=True)
class MacroConfig:
    """Rendering settings shared by the expansion rules."""
    decoder_type: str = "ObjectMapper.Map"
    accepted_decoder_types: Tuple[str, ...] = ("Map", "ObjectMapper.Map")
    decoder_parameter: str = "map"
    bind_operator: str = "<-"
    conformance_name: str = "Mappable"
    mapping_function: str = "mapping"
    resource_lookup: str = "Bundle.main.object(forInfoDictionaryKey: {key})"
    default_resource_type: str = "String"
    interface_suffix: str = "Interface"
    interface_base: str = "AnyObject"
    indent_size: int = 4

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MacroConfig':
        """Create MacroConfig from dictionary."""
        defaults = cls()
        known = {f.name: f for f in fields(cls)}
        values: Dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown macro setting: {key}")
                continue

            default = getattr(defaults, key)
            if isinstance(default, tuple):
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    logger.warning(f"Invalid value for {key}: {value!r}, using default")
                    continue
                value = tuple(value)
            elif isinstance(default, int):
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    logger.warning(f"Invalid value for {key}: {value!r}, using default")
                    continue
            elif not isinstance(value, str) or not value:
                logger.warning(f"Invalid value for {key}: {value!r}, using default")
                continue

            values[key] = value

        if 'resource_lookup' in values and '{key}' not in values['resource_lookup']:
            logger.warning("resource_lookup must contain a '{key}' placeholder, using default")
            del values['resource_lookup']

        return replace(defaults, **values)

    @property
    def indent(self) -> str:
        return " " * self.indent_size


@dataclass
class EngineOptions:
    """Options controlling which macros run and how batches are scheduled."""
    enabled_macros: List[str] = field(default_factory=list)
    disabled_macros: List[str] = field(default_factory=list)
    max_workers: int = 4
    log_level: LogLevel = LogLevel.INFO

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EngineOptions':
        """Create EngineOptions from dictionary."""
        log_level = LogLevel.INFO
        if 'log_level' in data:
            try:
                log_level = LogLevel(data['log_level'])
            except ValueError:
                logger.warning(f"Invalid log level: {data['log_level']}")

        max_workers = data.get('max_workers', 4)
        if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
            logger.warning(f"Invalid max_workers: {max_workers!r}")
            max_workers = 4

        return cls(
            enabled_macros=data.get('enabled_macros', []),
            disabled_macros=data.get('disabled_macros', []),
            max_workers=max_workers,
            log_level=log_level
        )


class Config:
    """Main configuration class for SyMacros."""

    def __init__(self):
        self._macro_config = MacroConfig()
        self._options = EngineOptions()

    @property
    def macro_config(self) -> MacroConfig:
        """Get rendering settings."""
        return self._macro_config

    @property
    def options(self) -> EngineOptions:
        """Get engine options."""
        return self._options

    def load_config(self, path: Path) -> None:
        """
        Load configuration from a JSON file.

        The format is:
        {
          "macros": { "<MacroConfig field>": <value>, ... },
          "enabled_macros": ["<macro name>"],
          "disabled_macros": ["<macro name>"],
          "max_workers": 4,
          "log_level": "info"
        }

        Args:
            path: Path to the configuration JSON file
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            self.update(data)
            logger.info(f"Loaded configuration from {path}")

        except Exception as e:
            logger.error(f"Failed to load configuration from {path}: {e}")
            raise

    def update(self, data: Dict[str, Any]) -> None:
        """Apply a configuration dictionary."""
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a JSON object, got {type(data).__name__}")
        if not isinstance(data.get('macros', {}), dict):
            raise ValueError("'macros' must be a JSON object")

        self._macro_config = MacroConfig.from_dict(data.get('macros', {}))
        self._options = EngineOptions.from_dict(
            {key: value for key, value in data.items() if key != 'macros'}
        )
        if 'log_level' in data:
            self.set_log_level(self._options.log_level)

    def set_log_level(self, level: LogLevel) -> None:
        """Apply a log level to the root logger."""
        log_level_map = {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.TRACE: logging.DEBUG  # Python doesn't have TRACE, use DEBUG
        }
        logging.getLogger().setLevel(log_level_map[level])

    def is_macro_enabled(self, name: str) -> bool:
        """Check whether a macro may run; explicit enables win over disables."""
        if name in self._options.enabled_macros:
            return True
        return name not in self._options.disabled_macros

    def clear(self) -> None:
        """Reset to defaults."""
        self._macro_config = MacroConfig()
        self._options = EngineOptions()
        logger.debug("Configuration cleared")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        macro_config = {f.name: getattr(self._macro_config, f.name) for f in fields(MacroConfig)}
        macro_config['accepted_decoder_types'] = list(self._macro_config.accepted_decoder_types)
        return {
            'macros': macro_config,
            'enabled_macros': list(self._options.enabled_macros),
            'disabled_macros': list(self._options.disabled_macros),
            'max_workers': self._options.max_workers,
            'log_level': self._options.log_level.value,
        }
