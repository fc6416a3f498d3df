"""
Utility modules for the Correios quotation client
"""
from .config_loader import CorreiosConfig, load_correios_config

__all__ = [
    'CorreiosConfig',
    'load_correios_config',
]
