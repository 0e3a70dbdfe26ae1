# audit_log_parser/config.py

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_ENV = "AUDIT_LOG_PARSER_CONFIG"
CONFIG_NAME = "audit_log_parser.yaml"


@dataclass(frozen=True)
class ParserOptions:
    flatten: bool = False
    separator: str = "."
    message_key: str = "_message"


def _config_path(path=None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return Path(env_path)
    # audit_log_parser/config.py -> audit_log_parser/ -> .. -> корень проекта
    return Path(__file__).resolve().parent.parent / CONFIG_NAME


def load_options(path=None) -> ParserOptions:
    """
    Читает audit_log_parser.yaml:

      flatten: false
      separator: "."
      message_key: _message

    Если файла нет — настройки по умолчанию.
    """
    cfg_path = _config_path(path)
    if not cfg_path.exists():
        return ParserOptions()

    with cfg_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{cfg_path}: expected a mapping, got {type(data).__name__}")

    defaults = ParserOptions()
    separator = str(data.get("separator", defaults.separator))
    if not separator:
        raise ValueError(f"{cfg_path}: separator must not be empty")

    flatten = data.get("flatten", defaults.flatten)
    if not isinstance(flatten, bool):
        raise ValueError(f"{cfg_path}: flatten must be true or false, got {flatten!r}")

    return ParserOptions(
        flatten=flatten,
        separator=separator,
        message_key=str(data.get("message_key", defaults.message_key)),
    )
