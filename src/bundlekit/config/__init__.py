# pyright: reportUnusedImport=false
from bundlekit.config.decorator import SettingProperty, config_setting
from bundlekit.config.loader import bind_config_file, load_config_file
from bundlekit.config.registry import ConfigProperty, all_registered
from bundlekit.config.validation import (
    ConfigValidationError,
    bind_config_values,
    ensure_required_config_values,
    get_config,
    reset_config,
    resolve_config_value,
)
