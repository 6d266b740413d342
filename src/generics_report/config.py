import codecs
import json
from pathlib import Path
from typing import Any

import commentjson  # type: ignore

from .models import CONTEXT_MODES


class ConfigurationManager:
    """
    Manages loading and merging of application configuration.
    """

    def __init__(self, *, base_path: Path | None = None) -> None:
        self._base_path = base_path or Path(__file__).parent

    def load_config(
        self, user_config_path: str | None, cli_overrides: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Loads defaults, merges with user JSON, and applies CLI overrides.
        """
        config = self._load_defaults()

        if user_config_path:
            self._merge_user_file(config, Path(user_config_path))

        # Apply CLI overrides (filtering out None values)
        config.update({k: v for k, v in cli_overrides.items() if v is not None})

        config.setdefault("context_mode", "stack")
        config.setdefault("collapse_bound_whitespace", True)
        config.setdefault("encoding", "utf-8")

        if config["context_mode"] not in CONTEXT_MODES:
            raise ValueError(
                f"Invalid context_mode {config['context_mode']!r}; "
                f"expected one of {', '.join(CONTEXT_MODES)}"
            )
        if not config.get("input_path") or not isinstance(config["input_path"], str):
            raise ValueError("input_path must be a non-empty string.")
        if not isinstance(config["collapse_bound_whitespace"], bool):
            raise ValueError(
                "collapse_bound_whitespace must be true or false, got "
                f"{config['collapse_bound_whitespace']!r}"
            )
        self._check_encoding(config["encoding"])

        return config

    def _load_defaults(self) -> dict[str, Any]:
        defaults_path = self._base_path / "defaults.json"
        if not defaults_path.exists():
            return {}

        with open(defaults_path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _merge_user_file(self, config: dict[str, Any], path: Path) -> None:
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                user_conf = commentjson.load(f)
        except Exception as e:
            raise ValueError(f"Failed to parse config file {path}: {e}")
        if not isinstance(user_conf, dict):
            raise ValueError(f"Config file {path} must contain a JSON object.")
        config.update(user_conf)

    @staticmethod
    def _check_encoding(encoding: Any) -> None:
        if not isinstance(encoding, str):
            raise ValueError(f"encoding must be a codec name, got {encoding!r}")
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding {encoding!r}")
