"""
Jerarquía de errores del motor de distribución
Cada error expone un `kind` verificable y un mensaje legible para el usuario
"""

from typing import Any, Dict, Iterable, Optional


class DistributionError(Exception):
    """Error base para todas las fallas de una distribución"""

    kind = 'distribution_error'
    title = 'Upload Failed'

    def __init__(self, message: str, user_message: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        self.user_message = user_message or message
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': 'error',
            'kind': self.kind,
            'title': self.title,
            'error': self.user_message
        }


class UnsupportedFileType(DistributionError):
    """El archivo fue rechazado por el validador"""

    kind = 'unsupported_file_type'
    title = 'Invalid File Type'

    def __init__(self, file_name: str, declared_mime_type: Optional[str] = None):
        self.file_name = file_name
        self.declared_mime_type = declared_mime_type
        super().__init__(
            f"Unsupported file type: {file_name!r} ({declared_mime_type or 'no MIME type'})",
            user_message='Please upload a CSV, XLSX, or XLS file.',
            context={'file_name': file_name, 'declared_mime_type': declared_mime_type}
        )


class FormatError(DistributionError):
    """El contenido no tiene el formato delimitado esperado"""

    kind = 'format_error'


class MissingColumnsError(FormatError):
    """El encabezado no contiene todas las columnas requeridas"""

    def __init__(self, missing_columns: Iterable[str]):
        self.missing_columns = list(missing_columns)
        missing = ', '.join(self.missing_columns)
        super().__init__(
            f"missing required column(s): {missing}",
            user_message=f"CSV must contain FirstName, Phone, and Notes columns (missing: {missing})",
            context={'missing_columns': self.missing_columns}
        )


class ConfigError(DistributionError):
    """El roster de agentes no permite distribuir"""

    kind = 'config_error'
