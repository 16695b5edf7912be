import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import ChunkingConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def load_chunking_config(path: str | Path) -> ChunkingConfig:
    """
    Load and validate a ChunkingConfig from a JSON file.

    The file holds either the config object itself or one nested under a
    top-level "chunking" key. camelCase and snake_case keys are accepted.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError("Cannot read chunking config", str(path), exc) from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError("Chunking config is not valid JSON", str(path), exc) from exc

    if isinstance(data, dict) and isinstance(data.get("chunking"), dict):
        data = data["chunking"]
    if not isinstance(data, dict):
        raise ConfigurationError("Chunking config must be a JSON object", str(path))

    try:
        return ChunkingConfig.model_validate(data)
    except (ValidationError, ValueError) as exc:
        raise ConfigurationError("Chunking config failed validation", str(path), exc) from exc


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


@dataclass
class ChunkingServiceConfig:
    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    placeholder_page_text: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str | Path] = None) -> "ChunkingServiceConfig":
        if env_file is not None:
            load_dotenv(env_file)

        config_path = os.environ.get("CHUNKING_CONFIG_PATH")
        chunking = load_chunking_config(config_path) if config_path else ChunkingConfig()

        enabled = os.environ.get("CHUNKING_ENABLED")
        if enabled:
            chunking = chunking.model_copy(
                update={"enabled": _parse_bool("CHUNKING_ENABLED", enabled)}
            )

        log_level = os.environ.get("CHUNKING_LOG_LEVEL", cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown CHUNKING_LOG_LEVEL: {log_level}")

        return cls(chunking=chunking, log_level=log_level)
