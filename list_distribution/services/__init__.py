"""
Services module del motor de distribución
Contiene validación, parseo, división y orquestación
"""

from .file_validator import FileValidator
from .record_parser import RecordParser, ParseReport
from .partitioner import Partitioner, compute_group_sizes
from .uuid_generator import UUIDGenerator
from .distribution_session import DistributionSession, distribute

__all__ = [
    'FileValidator',
    'RecordParser',
    'ParseReport',
    'Partitioner',
    'compute_group_sizes',
    'UUIDGenerator',
    'DistributionSession',
    'distribute'
]
