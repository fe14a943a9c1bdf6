"""
File Validator - Validador de tipo de archivo
Responsable de aceptar o rechazar archivos antes de cualquier parseo
"""

from typing import Iterable, Optional

from list_distribution.models import FileUpload
from list_distribution.utils.config import Config, config as default_config
from list_distribution.utils.logger import setup_logger


def get_file_extension(file_name: Optional[str]) -> str:
    """
    Obtiene la extensión en minúsculas, incluyendo el punto

    Args:
        file_name: Nombre del archivo

    Returns:
        str: Extensión (ej: '.csv') o cadena vacía si no tiene punto
    """
    if not isinstance(file_name, str) or not file_name:
        return ''
    _, dot, extension = file_name.rpartition('.')
    if not dot:
        return ''
    return f".{extension.lower()}"


def normalize_mime_type(mime_type: Optional[str]) -> str:
    """Quita parámetros ('; charset=...'), espacios y mayúsculas"""
    if not isinstance(mime_type, str) or not mime_type:
        return ''
    return mime_type.split(';', 1)[0].strip().lower()


class FileValidator:
    """
    Validador de archivos de contactos
    Acepta por tipo MIME declarado o por extensión del nombre
    """

    def __init__(self, allowed_mime_types: Optional[Iterable[str]] = None,
                 allowed_extensions: Optional[Iterable[str]] = None,
                 settings: Optional[Config] = None):
        settings = settings or default_config
        self.logger = setup_logger(__name__, 'file-validator', settings.APP_VERSION)

        if allowed_mime_types is None:
            allowed_mime_types = settings.ALLOWED_MIME_TYPES
        if allowed_extensions is None:
            allowed_extensions = settings.ALLOWED_EXTENSIONS

        # Una lista vacía desactiva ese criterio
        self.allowed_mime_types = frozenset(normalize_mime_type(m) for m in allowed_mime_types)
        self.allowed_extensions = frozenset(e.lower() for e in allowed_extensions)

    def is_allowed_mime_type(self, mime_type: Optional[str]) -> bool:
        return normalize_mime_type(mime_type) in self.allowed_mime_types

    def is_allowed_extension(self, file_name: Optional[str]) -> bool:
        extension = get_file_extension(file_name)
        return bool(extension) and extension in self.allowed_extensions

    def validate(self, upload: FileUpload, trace_id: Optional[str] = None) -> bool:
        """
        Valida el tipo de archivo

        Args:
            upload: Archivo recibido (nombre y tipo MIME declarado)
            trace_id: ID de trazabilidad

        Returns:
            bool: True si el MIME o la extensión están permitidos
        """
        name = getattr(upload, 'name', None)
        mime_type = getattr(upload, 'declared_mime_type', None)

        mime_ok = self.is_allowed_mime_type(mime_type)
        extension_ok = self.is_allowed_extension(name)
        accepted = mime_ok or extension_ok

        self.logger.debug(
            "Validación de tipo de archivo",
            context={
                'file_name': name,
                'declared_mime_type': mime_type,
                'mime_match': mime_ok,
                'extension_match': extension_ok,
                'accepted': accepted
            },
            trace_id=trace_id
        )

        return accepted
