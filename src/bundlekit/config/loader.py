import json
import tomllib
from logging import getLogger
from os import PathLike
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from bundlekit.config.validation import (
    bind_config_values,
    ensure_required_config_values,
    get_config,
)

_logger = getLogger(__name__)


def load_config_file(path: str | PathLike[str] | Path) -> Mapping[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'Config file not found: {path}')

    config = None
    text = path.read_text(encoding='utf-8')
    suffix = path.suffix.lower()
    match suffix:
        case '.yaml' | '.yml':
            config = yaml.safe_load(text)
        case '.json':
            config = json.loads(text)
        case '.toml':
            config = tomllib.loads(text)
        case _:
            raise RuntimeError(
                f'Unsupported config file type: {suffix}, supported extensions: .yaml, .yml, .json, .toml'
            )

    if not isinstance(config, Mapping):
        raise RuntimeError('Config file must contain a mapping at the top level')

    return cast(Mapping[str, Any], config)


def bind_config_file(path: str | PathLike[str] | Path) -> None:
    """Load ``path``, validate its values against the bound config and bind them.

    Nothing is bound when validation fails.

    Raises
    ------
    ConfigValidationError
        When a loaded value does not match its registered setting.
    """
    config = load_config_file(path)
    ensure_required_config_values({**get_config(), **config})
    _logger.info('Binding bundlekit settings from %s', path)
    bind_config_values(**config)
