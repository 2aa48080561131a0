"""
Message configuration loading and argument validation.

The config file is the YAML file that was used to extract the message
catalogs.  Only three keys matter here::

    format: yaml
    messagePath: messages
    languages: [de, fr]
"""

import os
from dataclasses import dataclass, field

import yaml

from .errors import ConfigurationError

CATALOG_FORMAT = "yaml"


@dataclass(frozen=True)
class RunConfig:
    """Validated message configuration for a single run."""
    config_path: str
    message_path: str
    languages: tuple
    format: str = CATALOG_FORMAT
    extra: dict = field(default_factory=dict, compare=False)


def load_config(config_path):
    """Load the raw message config from a YAML file.

    ``format`` defaults to ``"yaml"`` when the file does not set it.
    """
    defaults = {
        "format": CATALOG_FORMAT,
    }
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"The configuration file is not valid YAML: {config_path} ({exc})"
        ) from exc
    if user_config is None:
        user_config = {}
    if not isinstance(user_config, dict):
        raise ConfigurationError(
            f"The configuration file must contain a mapping: {config_path}")
    defaults.update(user_config)
    return defaults


def check_args(config_path, excel_dir):
    """Check the command arguments and return a :class:`RunConfig`.

    Args:
        config_path: Path of the message configuration file.
        excel_dir: Directory the workbooks are written to / read from.

    Raises:
        ConfigurationError: if anything is missing or invalid.
    """
    config_path = os.path.expanduser(config_path)
    if not os.path.isfile(config_path):
        raise ConfigurationError(
            f"The configuration file does not exist: {config_path}")
    excel_dir = os.path.expanduser(excel_dir)
    if not os.path.isdir(excel_dir):
        raise ConfigurationError(
            f"The Excel directory does not exist: {excel_dir}")

    config = load_config(config_path)

    if not config.get("format") or config["format"] != CATALOG_FORMAT:
        raise ConfigurationError(f'Format must be "{CATALOG_FORMAT}".')

    message_path = config.get("messagePath")
    if not message_path:
        raise ConfigurationError(
            'The configuration file must specify "messagePath".')
    message_path = os.path.expanduser(str(message_path))
    if not os.path.isabs(message_path):
        base_dir = os.path.dirname(os.path.abspath(config_path))
        message_path = os.path.join(base_dir, message_path)
    if not os.path.isdir(message_path):
        raise ConfigurationError(
            f"The message path {message_path} is not a valid directory.")

    languages = config.get("languages")
    if isinstance(languages, str):
        languages = [languages]
    if not languages:
        raise ConfigurationError("Languages cannot be empty.")
    if not isinstance(languages, list) or any(
            isinstance(lang, (dict, list)) for lang in languages):
        raise ConfigurationError(
            "Languages must be a list of language codes.")

    extra = {k: v for k, v in config.items()
             if k not in ("format", "messagePath", "languages")}
    return RunConfig(
        config_path=config_path,
        message_path=message_path,
        languages=tuple(str(lang) for lang in languages),
        format=config["format"],
        extra=extra,
    )
