"""
Sistema de logging estructurado para el motor de distribución
Implementa logging consistente con contexto y trazabilidad
"""

import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger.json import JsonFormatter

from .config import config


class CustomJsonFormatter(JsonFormatter):
    """
    Formateador JSON personalizado para logs estructurados
    """

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        """
        Añade campos personalizados al log record
        """
        super().add_fields(log_record, record, message_dict)

        if not log_record.get('timestamp'):
            log_record['timestamp'] = datetime.now(timezone.utc).isoformat()

        log_record['level'] = record.levelname
        log_record['service'] = getattr(record, 'service', 'unknown-service')
        log_record['version'] = getattr(record, 'version', '1.0.0')

        if hasattr(record, 'context'):
            log_record['context'] = record.context

        if hasattr(record, 'trace_id'):
            log_record['trace_id'] = record.trace_id


class StructuredLogger:
    """
    Logger estructurado con contexto y trazabilidad
    """

    def __init__(self, name: str, service_name: str = 'unknown-service', version: str = '1.0.0'):
        self.logger = logging.getLogger(name)
        self.service_name = service_name
        self.version = version
        self._setup_logger()

    def _setup_logger(self):
        """
        Configura el logger con formateo estructurado
        """
        # Evitar configurar múltiples veces
        if self.logger.handlers:
            return

        log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
        self.logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stdout)

        if config.LOG_FORMAT == 'text':
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        else:
            formatter = CustomJsonFormatter(
                '%(timestamp)s %(level)s %(name)s %(message)s %(service)s %(version)s'
            )

        handler.setFormatter(formatter)
        self.logger.addHandler(handler)

        # Prevenir propagación a loggers padre
        self.logger.propagate = False

    def _log_with_context(self, level: int, msg: str, context: Optional[Dict[str, Any]] = None,
                          trace_id: Optional[str] = None):
        """
        Registra mensaje con contexto estructurado
        """
        extra = {
            'service': self.service_name,
            'version': self.version
        }

        if context:
            extra['context'] = context

        if trace_id:
            extra['trace_id'] = trace_id

        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, context: Optional[Dict[str, Any]] = None,
              trace_id: Optional[str] = None):
        """Log debug message"""
        self._log_with_context(logging.DEBUG, f"🔍 {msg}", context, trace_id)

    def info(self, msg: str, context: Optional[Dict[str, Any]] = None,
             trace_id: Optional[str] = None):
        """Log info message"""
        self._log_with_context(logging.INFO, f"ℹ️ {msg}", context, trace_id)

    def warning(self, msg: str, context: Optional[Dict[str, Any]] = None,
                trace_id: Optional[str] = None):
        """Log warning message"""
        self._log_with_context(logging.WARNING, f"⚠️ {msg}", context, trace_id)

    def error(self, msg: str, context: Optional[Dict[str, Any]] = None,
              trace_id: Optional[str] = None, exc_info: bool = False):
        """Log error message"""
        if exc_info:
            context = dict(context or {})
            context['exception'] = traceback.format_exc()

        self._log_with_context(logging.ERROR, f"❌ {msg}", context, trace_id)

    def success(self, msg: str, context: Optional[Dict[str, Any]] = None,
                trace_id: Optional[str] = None):
        """Log success message (info level)"""
        self._log_with_context(logging.INFO, f"✅ {msg}", context, trace_id)

    def processing(self, msg: str, context: Optional[Dict[str, Any]] = None,
                   trace_id: Optional[str] = None):
        """Log processing message (info level)"""
        self._log_with_context(logging.INFO, f"🔄 {msg}", context, trace_id)

    def performance(self, msg: str, duration: float, context: Optional[Dict[str, Any]] = None,
                    trace_id: Optional[str] = None):
        """Log performance metrics"""
        perf_context = dict(context or {})
        perf_context['duration_seconds'] = round(duration, 6)
        self._log_with_context(logging.INFO, f"⚡ {msg}", perf_context, trace_id)


def setup_logger(name: str, service_name: str = 'unknown-service',
                 version: Optional[str] = None) -> StructuredLogger:
    """
    Factory function para crear logger estructurado

    Args:
        name: Nombre del logger (usualmente __name__)
        service_name: Nombre del componente
        version: Versión del servicio (default: APP_VERSION)

    Returns:
        StructuredLogger: Logger configurado
    """
    return StructuredLogger(name, service_name, version or config.APP_VERSION)
