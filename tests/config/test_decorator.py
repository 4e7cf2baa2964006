import pytest

from bundlekit.config.decorator import SettingProperty, config_setting
from bundlekit.config.registry import all_registered
from bundlekit.config.validation import bind_config_values
from bundlekit.settings import BundleSettings


def test_decorator_registers_property_and_warns_without_return_annotation():
    class C:  # pyright: ignore[reportUnusedClass]
        @config_setting
        def value(self) -> int: ...

    regs = all_registered()
    assert any(r.collection_name == 'C' and r.key == 'value' and r.required for r in regs)
    assert isinstance(C.__dict__['value'], SettingProperty)

    with pytest.warns(RuntimeWarning):

        class D:  # pyright: ignore[reportUnusedClass]
            @config_setting
            def missing(self): ...


def test_property_reads_from_bound_config():
    class E:
        @config_setting
        def value(self) -> int: ...

    class F:
        @config_setting
        def value(self) -> int: ...

    bind_config_values(**{'value': 0, 'E': {'value': 123}})
    assert E().value == 123
    assert F().value == 0

    # Class-scoped keys win over flat ones
    bind_config_values(**{'F.value': 7})
    assert F().value == 7
    assert E().value == 123


def test_config_setting_has_no_name_override():
    with pytest.raises(TypeError):
        config_setting(name='other')  # type: ignore


def test_default_and_required():
    class H:
        @config_setting(default=5)
        def optional(self) -> int: ...

        @config_setting
        def required(self) -> int: ...

    h = H()
    assert h.optional == 5
    with pytest.raises(KeyError):
        _ = h.required

    bind_config_values(**{'H.optional': 6})
    assert h.optional == 6


def test_bundle_settings_defaults():
    s = BundleSettings()
    assert s.infer_long_integers is False
    assert s.warn_on_kind_mismatch is False

    bind_config_values(warn_on_kind_mismatch=True)
    assert s.warn_on_kind_mismatch is True
