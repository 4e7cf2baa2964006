from dataclasses import dataclass
from typing import Any, Callable, List

MISSING: Any = object()


@dataclass(frozen=True)
class ConfigProperty:
    """Metadata for a configuration-backed setting.

    The registry stores one entry per setting declared with
    :func:`~bundlekit.config.decorator.config_setting`, so validation can
    run without importing the classes that declare them.

    Attributes
    ----------
    key:
        The name used in the configuration mapping.
    collection_name:
        The name of the class that declares the setting. Used to build
        class-scoped keys such as ``BundleSettings.infer_long_integers``.
    expected_type:
        The Python type expected for the value, or ``None`` when no type
        checking should be performed.
    default:
        Value used when the configuration holds no entry for the setting,
        or :data:`MISSING` when the setting is required.
    fget:
        The original getter function the property was created from.
    """

    key: str
    collection_name: str
    expected_type: type[Any] | None
    default: Any
    fget: Callable[..., Any]

    @property
    def required(self) -> bool:
        return self.default is MISSING


_REGISTRY: List[ConfigProperty] = []


def register(entry: ConfigProperty) -> None:
    """Register a ``ConfigProperty`` entry in the global registry.

    Re-registering the same ``collection_name.key`` replaces the previous
    entry, so reloading a module does not produce duplicates.
    """

    _REGISTRY[:] = [
        registered
        for registered in _REGISTRY
        if (registered.collection_name, registered.key) != (entry.collection_name, entry.key)
    ]
    _REGISTRY.append(entry)


def all_registered() -> List[ConfigProperty]:
    """Return a shallow copy of all registered configuration entries."""

    return list(_REGISTRY)
