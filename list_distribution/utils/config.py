"""
Configuración centralizada del motor de distribución de listas
Maneja variables de entorno y valores por defecto del motor
"""

import codecs
import os
from typing import List, Optional
from dotenv import load_dotenv

# Cargar variables de entorno
load_dotenv()


DEFAULT_ALLOWED_MIME_TYPES = [
    'text/csv',
    'application/vnd.ms-excel',
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
]

DEFAULT_ALLOWED_EXTENSIONS = ['.csv', '.xlsx', '.xls']


def _parse_list(raw_value: Optional[str], default: List[str]) -> List[str]:
    """
    Convierte una variable separada por comas en lista normalizada

    Args:
        raw_value: Valor crudo de la variable de entorno
        default: Lista por defecto si la variable no está definida

    Returns:
        List[str]: Elementos en minúsculas y sin espacios
    """
    if raw_value is None or not raw_value.strip():
        return list(default)
    return [item.strip().lower() for item in raw_value.split(',') if item.strip()]


class Config:
    """
    Configuración del motor de distribución
    Cada instancia lee el entorno al construirse
    """

    def __init__(self):
        # Configuración general de la aplicación
        self.APP_NAME = os.getenv('APP_NAME', 'list-distribution')
        self.APP_VERSION = os.getenv('APP_VERSION', '1.0.0')
        self.ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

        # Configuración de validación de archivos
        self.ALLOWED_MIME_TYPES = _parse_list(os.getenv('ALLOWED_MIME_TYPES'), DEFAULT_ALLOWED_MIME_TYPES)
        self.ALLOWED_EXTENSIONS = _parse_list(os.getenv('ALLOWED_EXTENSIONS'), DEFAULT_ALLOWED_EXTENSIONS)

        # Configuración de parseo
        self.FIELD_DELIMITER = os.getenv('FIELD_DELIMITER', ',')
        self.FILE_ENCODING = os.getenv('FILE_ENCODING', 'utf-8-sig')
        self.QUOTE_AWARE_PARSING = os.getenv('QUOTE_AWARE_PARSING', 'False').lower() == 'true'

        # Configuración de logging
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
        self.LOG_FORMAT = os.getenv('LOG_FORMAT', 'json').lower()

        # Validar configuraciones críticas
        self._validate_configuration()

    def _validate_configuration(self):
        """
        Valida configuraciones críticas requeridas

        Raises:
            ValueError: Si alguna configuración es inválida
        """
        if len(self.FIELD_DELIMITER) != 1:
            raise ValueError("FIELD_DELIMITER debe ser un único carácter")

        if self.FIELD_DELIMITER in ('"', '\n', '\r'):
            raise ValueError(f"FIELD_DELIMITER no permitido: {self.FIELD_DELIMITER!r}")

        for extension in self.ALLOWED_EXTENSIONS:
            if not extension.startswith('.'):
                raise ValueError(f"Extensión debe comenzar con punto: {extension}")

        try:
            codecs.lookup(self.FILE_ENCODING)
        except LookupError as e:
            raise ValueError(f"FILE_ENCODING no soportado: {self.FILE_ENCODING}") from e

        if self.LOG_FORMAT not in ('json', 'text'):
            raise ValueError("LOG_FORMAT debe ser 'json' o 'text'")

    def get_service_config_summary(self) -> dict:
        """
        Obtiene resumen de configuración

        Returns:
            dict: Resumen de configuración
        """
        return {
            'app_name': self.APP_NAME,
            'app_version': self.APP_VERSION,
            'environment': self.ENVIRONMENT,
            'validation': {
                'allowed_mime_types': list(self.ALLOWED_MIME_TYPES),
                'allowed_extensions': list(self.ALLOWED_EXTENSIONS)
            },
            'parsing': {
                'field_delimiter': self.FIELD_DELIMITER,
                'file_encoding': self.FILE_ENCODING,
                'quote_aware': self.QUOTE_AWARE_PARSING
            },
            'log_level': self.LOG_LEVEL,
            'log_format': self.LOG_FORMAT
        }

    def __repr__(self) -> str:
        return f"Config(app={self.APP_NAME}, env={self.ENVIRONMENT}, version={self.APP_VERSION})"


# Instancia global de configuración
config = Config()
