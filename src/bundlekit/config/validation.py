from types import MappingProxyType
from typing import Any, Mapping

from bundlekit.config.registry import all_registered

_CONFIG_CONTEXT: dict[str, Any] = {}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails.

    Raised by :func:`ensure_required_config_values` when one or more
    registered settings are missing from the bound configuration or hold a
    value of the wrong type.
    """


def bind_config_values(**kwargs: Any) -> None:
    """Merge values into the process-wide configuration.

    Keys are plain strings matched with the precedence rules of
    :func:`resolve_config_value`. Later bindings overwrite earlier ones key
    by key.
    """
    _CONFIG_CONTEXT.update(kwargs)


def reset_config() -> None:
    """Drop every bound configuration value."""
    _CONFIG_CONTEXT.clear()


def get_config() -> Mapping[str, Any]:
    """Return a read-only view of the bound configuration."""
    return MappingProxyType(_CONFIG_CONTEXT)


def resolve_config_value(
    *, config: Mapping[str, Any] | None = None, key: str, collection_name: str | None = None
) -> Any:
    """Resolve a configuration value using string-based precedence.

    Candidate keys, first match wins:

    - ``{collection_name}.{key}`` as a flat key
    - ``{collection_name}`` as a nested mapping holding ``key``
    - ``{key}``

    Parameters
    ----------
    config:
        The mapping to search. Defaults to the bound configuration.
    key:
        The setting name. May itself be dotted, in which case the first
        component is looked up as a nested mapping.
    collection_name:
        The name of the class declaring the setting.

    Returns
    -------
    Any
        The first matching value.

    Raises
    ------
    KeyError
        If none of the candidate keys are present.
    """
    if config is None:
        config = get_config()

    if collection_name:
        try:
            return resolve_config_value(config=config, key=f'{collection_name}.{key}')
        except KeyError:
            pass

    # Flat keys > nested keys
    if key in config:
        return config[key]

    collection, _, restkey = key.partition('.')
    if restkey and isinstance(config.get(collection), Mapping):
        return resolve_config_value(config=config[collection], key=restkey)

    raise KeyError(f'No config value for {key}')


def ensure_required_config_values(config: Mapping[str, Any] | None = None) -> None:
    """Validate a configuration mapping against the registered settings.

    Every registered setting is resolved from ``config``. A required setting
    that does not resolve, or any resolved value that does not match the
    registered ``expected_type``, is recorded. All problems are reported
    together.

    Raises
    ------
    ConfigValidationError
        When a required setting is missing or a type mismatch is found.
    """
    if config is None:
        config = get_config()

    errors: list[str] = []

    for entry in all_registered():
        try:
            value = resolve_config_value(
                config=config,
                key=entry.key,
                collection_name=entry.collection_name,
            )
        except KeyError as exc:
            if entry.required:
                errors.append(str(exc))
            continue

        if entry.expected_type and not isinstance(value, entry.expected_type):
            errors.append(
                f'Type mismatch for {entry.collection_name}.{entry.key}: '
                f'expected {entry.expected_type.__name__}, '
                f'got {type(value).__name__}'
            )

    if errors:
        raise ConfigValidationError('Configuration validation failed:\n' + '\n'.join(errors))
