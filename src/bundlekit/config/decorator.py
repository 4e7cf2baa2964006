import warnings
from functools import wraps
from typing import Any, Callable, Generic, TypeVar, get_type_hints, overload

from bundlekit.config.registry import MISSING, ConfigProperty, register
from bundlekit.config.validation import resolve_config_value

T = TypeVar('T')


class SettingProperty(property, Generic[T]):
    """Read-only property resolved from the bound configuration."""

    @overload
    def __get__(self, instance: None, owner: type[Any] | None = None) -> 'SettingProperty[T]': ...
    @overload
    def __get__(self, instance: object, owner: type[Any] | None = None) -> T: ...

    def __get__(self, instance: object | None, owner: type[Any] | None = None) -> Any:
        return super().__get__(instance, owner)


@overload
def config_setting(
    func: None = None, *, default: Any = MISSING
) -> Callable[[Callable[..., T]], SettingProperty[T]]: ...
@overload
def config_setting(func: Callable[..., T]) -> SettingProperty[T]: ...


def config_setting(
    func: Callable[..., T] | None = None,
    *,
    default: Any = MISSING,
) -> Callable[[Callable[..., T]], SettingProperty[T]] | SettingProperty[T]:
    '''Decorator for configuration-backed settings.

    The decorated method's body is never called; its name is the
    configuration key and its return annotation the expected type.
    Resolution is string-based and relies only on class names, see
    :func:`~bundlekit.config.validation.resolve_config_value`.

    Parameters
    ----------
    default : Any
        Value returned when the configuration holds no entry. Settings
        without a default are required and raise ``KeyError`` on access
        when unbound.

    Returns
    -------
    Callable[[Callable[..., T]], SettingProperty[T]]
        A decorator which converts the given function into a
        configuration-backed ``SettingProperty``.
    '''

    def decorator(method: Callable[..., T]) -> SettingProperty[T]:
        qual_parts = method.__qualname__.split('.')
        class_name = qual_parts[-2] if len(qual_parts) >= 2 else qual_parts[0]
        key = method.__name__

        type_hints = get_type_hints(method)
        expected_type: type[Any] | None = None
        if 'return' in type_hints:
            expected_type = type_hints['return']
        else:
            warnings.warn(
                f'Setting "{class_name}.{key}" cannot be type checked because it does not declare a return type',
                RuntimeWarning,
            )

        @wraps(method)
        def wrapper(self: Any) -> T:
            try:
                return resolve_config_value(key=key, collection_name=type(self).__name__)
            except KeyError:
                if default is MISSING:
                    raise
                return default

        # Registration occurs at decoration time
        register(
            ConfigProperty(
                key=key,
                collection_name=class_name,
                expected_type=expected_type,
                default=default,
                fget=method,
            )
        )

        return SettingProperty(wrapper)

    if func is not None:
        return decorator(func)

    return decorator
