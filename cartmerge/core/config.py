# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Cartmerge Contributors
#
# This file is part of Cartmerge.
#
# Cartmerge is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Cartmerge is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_NAMES = ("cartmerge.yaml", "cartmerge.yml", "cartmerge.json")

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True, slots=True)
class OrderConfig:
    """
    Behaviour switches for a single Order.

    indexed:
      - If True (default): matching lines are found through a dict keyed by
        (product, price).
      - If False: existing lines are scanned in insertion order.

    thread_safe:
      - If True: add_item runs under a lock owned by the order.
    """

    indexed: bool = True
    thread_safe: bool = False


@dataclass(frozen=True, slots=True)
class CartmergeConfig:
    order: OrderConfig = field(default_factory=OrderConfig)
    log_level: str = "WARNING"
    source: Path | None = None  # file the config was loaded from, if any


@dataclass(frozen=True, slots=True)
class ConfigLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def find_config_file(directory: str | Path) -> Path | None:
    d = Path(directory)
    for name in DEFAULT_CONFIG_NAMES:
        candidate = d / name
        if candidate.is_file():
            return candidate
    return None


class DefaultConfigLoader:
    """
    Loads CartmergeConfig from cartmerge.yaml / cartmerge.yml / cartmerge.json
    """

    def load(self, path: Path) -> CartmergeConfig:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

        data = self._read_config_file(path)

        # an empty YAML document means "all defaults"
        if data is None:
            return CartmergeConfig(source=path)

        if not isinstance(data, dict):
            raise ConfigLoadError(code="invalid_config", message="Config root must be a mapping/object.")

        version = data.get("version", 1)
        if not isinstance(version, int) or isinstance(version, bool):
            raise ConfigLoadError(code="invalid_version", message="'version' must be an integer.")

        return CartmergeConfig(
            order=self._parse_order(data.get("order")),
            log_level=self._parse_log_level(data.get("logging")),
            source=path,
        )

    def _read_config_file(self, path: Path) -> Any:
        raw = path.read_text(encoding="utf-8")

        try:
            if path.suffix.lower() == ".json":
                return json.loads(raw)
            return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigLoadError(
                code="config_parse_error",
                message=f"Cannot parse config file {path}: {e}",
                details={"path": str(path)},
            ) from e

    def _parse_order(self, raw: Any) -> OrderConfig:
        if raw is None:
            return OrderConfig()

        if not isinstance(raw, dict):
            raise ConfigLoadError(code="invalid_order", message="'order' must be a mapping/object.")

        defaults = OrderConfig()
        return OrderConfig(
            indexed=self._flag(raw, "indexed", defaults.indexed),
            thread_safe=self._flag(raw, "thread_safe", defaults.thread_safe),
        )

    def _flag(self, raw: Mapping[str, Any], key: str, default: bool) -> bool:
        value = raw.get(key, default)
        if not isinstance(value, bool):
            raise ConfigLoadError(
                code="invalid_flag",
                message=f"'order.{key}' must be true or false.",
                details={"key": key, "value": value},
            )
        return value

    def _parse_log_level(self, raw: Any) -> str:
        if raw is None:
            return CartmergeConfig().log_level

        if not isinstance(raw, dict):
            raise ConfigLoadError(code="invalid_logging", message="'logging' must be a mapping/object.")

        level = str(raw.get("level", CartmergeConfig().log_level)).upper()
        if level not in _LOG_LEVELS:
            raise ConfigLoadError(
                code="invalid_log_level",
                message=f"Unknown log level: {level}",
                details={"supported": list(_LOG_LEVELS)},
            )
        return level
