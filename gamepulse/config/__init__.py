# Config module
from .settings import SETTINGS, Settings, get_setting, reload_settings, validate_settings

__all__ = [
    'SETTINGS',
    'Settings',
    'get_setting',
    'reload_settings',
    'validate_settings'
]
