"""
Utilidades comunes del motor de distribución
"""

from .config import Config, config
from .logger import StructuredLogger, setup_logger

__all__ = [
    'Config',
    'config',
    'StructuredLogger',
    'setup_logger'
]
