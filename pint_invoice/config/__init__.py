"""
Configuration module for the invoicing system.
"""
from .settings import (
    InvoiceSettings,
    get_config,
    load_config,
    reload_config
)

__all__ = [
    'InvoiceSettings',
    'get_config',
    'load_config',
    'reload_config'
]
