"""
Motor de ingesta y distribución de listas de contactos
"""

from .exceptions import (
    ConfigError,
    DistributionError,
    FormatError,
    MissingColumnsError,
    UnsupportedFileType
)
from .models import AgentGroup, ContactRecord, DistributionResult, FileUpload
from .services import (
    DistributionSession,
    FileValidator,
    Partitioner,
    RecordParser,
    distribute
)

__version__ = '1.0.0'

__all__ = [
    'AgentGroup',
    'ConfigError',
    'ContactRecord',
    'DistributionError',
    'DistributionResult',
    'DistributionSession',
    'FileUpload',
    'FileValidator',
    'FormatError',
    'MissingColumnsError',
    'Partitioner',
    'RecordParser',
    'UnsupportedFileType',
    'distribute'
]
