"""Configuration management for the voice engine."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

from .utils.logging import get_logger
from .voice import thresholds as th

logger = get_logger(__name__)


DEFAULT_MIN_WORDS_BY_SOURCE = {
    "cover-letter": 50,
    "lex-chat": 20,
    "resume-upload": 50,
    "resume-builder": 30,
    "tailored-resume": 50,
    "manual-upload": 50,
    "other": 30,
}


@dataclass
class LearningConfig:
    """Configuration for the learning flow."""
    enabled: bool = True
    min_words_by_source: Dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_MIN_WORDS_BY_SOURCE)
    )
    default_min_words: int = 30
    history_limit: int = th.EVOLUTION_HISTORY_LIMIT
    top_words_limit: int = th.TOP_WORDS_LIMIT

    def min_words_for(self, source: str) -> int:
        """Minimum word count required before a source's text is learned.

        Unknown sources use the "other" limit, then default_min_words.
        """
        if source in self.min_words_by_source:
            return self.min_words_by_source[source]
        return self.min_words_by_source.get("other", self.default_min_words)


@dataclass
class StorageConfig:
    """Configuration for the file-backed profile store."""
    profile_dir: str = "voice_profiles/"


@dataclass
class Config:
    """Main configuration container."""
    learning: LearningConfig = field(default_factory=LearningConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    log_level: str = "INFO"
    log_json: bool = False


def _resolve_env_vars(value: Any) -> Any:
    """Resolve environment variables in string values."""
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        env_var = value[2:-1]
        resolved = os.environ.get(env_var, "")
        if not resolved:
            logger.warning(f"Environment variable {env_var} not set")
        return resolved
    elif isinstance(value, dict):
        return {k: _resolve_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_resolve_env_vars(v) for v in value]
    return value


def _parse_learning_config(data: Dict) -> LearningConfig:
    """Parse the learning section; source limits override the defaults."""
    min_words = dict(DEFAULT_MIN_WORDS_BY_SOURCE)
    min_words.update(data.get("min_words_by_source", {}))
    history_limit = data.get("history_limit", th.EVOLUTION_HISTORY_LIMIT)
    if not isinstance(history_limit, int) or history_limit < 1:
        raise ValueError(f"learning.history_limit must be a positive integer, got {history_limit!r}")
    return LearningConfig(
        enabled=data.get("enabled", True),
        min_words_by_source=min_words,
        default_min_words=data.get("default_min_words", 30),
        history_limit=history_limit,
        top_words_limit=data.get("top_words_limit", th.TOP_WORDS_LIMIT),
    )


def load_config(config_path: str = "config.json") -> Config:
    """Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Parsed configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is invalid.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            "Please copy config.json.sample to config.json and configure it."
        )

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object")

    data = _resolve_env_vars(data)
    config = Config()

    if "learning" in data:
        config.learning = _parse_learning_config(data["learning"])

    if "storage" in data:
        config.storage = StorageConfig(
            profile_dir=data["storage"].get("profile_dir", "voice_profiles/"),
        )

    config.log_level = data.get("log_level", "INFO")
    config.log_json = data.get("log_json", False)

    logger.info(f"Loaded configuration from {config_path}")
    return config


def create_default_config() -> Dict:
    """Create a default configuration dictionary."""
    return {
        "learning": {
            "enabled": True,
            "min_words_by_source": dict(DEFAULT_MIN_WORDS_BY_SOURCE),
            "default_min_words": 30,
            "history_limit": th.EVOLUTION_HISTORY_LIMIT,
            "top_words_limit": th.TOP_WORDS_LIMIT,
        },
        "storage": {
            "profile_dir": "voice_profiles/"
        },
        "log_level": "INFO",
        "log_json": False
    }
