"""
Distribution Session - Orquestación de una carga de contactos
Flujo: validación de tipo → decodificación → parseo → división entre agentes
"""

import time
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Sequence

from list_distribution.exceptions import DistributionError, FormatError, UnsupportedFileType
from list_distribution.models import DistributionResult, FileUpload
from list_distribution.services.file_validator import FileValidator
from list_distribution.services.partitioner import Partitioner
from list_distribution.services.record_parser import RecordParser, decode_content
from list_distribution.services.uuid_generator import UUIDGenerator
from list_distribution.utils.config import Config, config as default_config
from list_distribution.utils.logger import setup_logger


class DistributionSession:
    """
    Punto de entrada único para el host

    No guarda estado entre llamadas: cada run() trabaja sobre su propio
    archivo y roster y devuelve un resultado nuevo. El historial de
    resultados pertenece al host.
    """

    def __init__(self, validator: Optional[FileValidator] = None,
                 parser: Optional[RecordParser] = None,
                 partitioner: Optional[Partitioner] = None,
                 uuid_generator: Optional[UUIDGenerator] = None,
                 clock: Callable[[], datetime] = datetime.now,
                 settings: Optional[Config] = None):
        self.settings = settings or default_config
        self.logger = setup_logger(__name__, 'distribution-session', self.settings.APP_VERSION)

        self.uuid_generator = uuid_generator or UUIDGenerator()
        self.validator = validator or FileValidator(settings=self.settings)
        self.parser = parser or RecordParser(settings=self.settings)
        self.partitioner = partitioner or Partitioner(uuid_generator=self.uuid_generator)
        self.clock = clock

    def run(self, upload: FileUpload, roster: Sequence[str],
            trace_id: Optional[str] = None) -> DistributionResult:
        """
        Procesa un archivo completo y lo distribuye entre los agentes

        Args:
            upload: Archivo recibido del host
            roster: Agentes en orden de asignación
            trace_id: ID de trazabilidad (se genera si no se indica)

        Returns:
            DistributionResult: Resultado inmutable de la distribución

        Raises:
            UnsupportedFileType: Si el validador rechaza el archivo
            FormatError: Si faltan columnas o no hay registros válidos
            ConfigError: Si el roster está vacío o repetido
        """
        trace_id = trace_id or self.uuid_generator.generate_trace_id()
        started = time.perf_counter()
        roster = list(roster)

        self.logger.processing(
            f"Iniciando distribución de archivo: {upload.name}",
            context={'declared_mime_type': upload.declared_mime_type, 'total_agents': len(roster)},
            trace_id=trace_id
        )

        try:
            # Paso 1: Validar tipo de archivo
            if not self.validator.validate(upload, trace_id=trace_id):
                raise UnsupportedFileType(upload.name, upload.declared_mime_type)

            # Paso 2: Decodificar y parsear contenido
            content = decode_content(upload.content, self.settings.FILE_ENCODING)
            report = self.parser.parse_with_report(content, trace_id=trace_id)

            if not report.records:
                raise FormatError(
                    'no valid data found in the file',
                    user_message='No valid data found in the file',
                    context={'skipped_rows': report.skipped_rows}
                )

            # Paso 3: Dividir entre agentes
            created_at = self.clock()
            distribution_id = self.uuid_generator.generate_distribution_uuid(upload.name, created_at)
            groups = self.partitioner.partition(
                report.records, roster, distribution_id=distribution_id, trace_id=trace_id
            )

        except DistributionError as e:
            self.logger.error(
                f"Distribución rechazada: {e}",
                context={'file_name': upload.name, 'kind': e.kind, **e.context},
                trace_id=trace_id
            )
            raise
        except Exception as e:
            self.logger.error(
                f"Error inesperado distribuyendo archivo: {str(e)}",
                context={'file_name': upload.name},
                trace_id=trace_id,
                exc_info=True
            )
            raise

        result = DistributionResult(
            id=distribution_id,
            source_name=upload.name,
            created_at=created_at,
            total_record_count=len(report.records),
            groups=tuple(groups),
            skipped_row_count=report.skipped_rows
        )

        self.logger.performance(
            "Distribución completada",
            duration=time.perf_counter() - started,
            context={
                'distribution_id': result.id,
                'file_name': result.source_name,
                'total_records': result.total_record_count,
                'skipped_rows': result.skipped_row_count,
                'group_sizes': [group.record_count for group in result.groups]
            },
            trace_id=trace_id
        )

        return result

    def process_upload(self, upload: FileUpload, roster: Sequence[str],
                       trace_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Igual que run() pero devuelve un diccionario para el host

        Returns:
            Dict con status 'success' y el resultado, o status 'error' con
            kind, título y mensaje para el usuario
        """
        try:
            result = self.run(upload, roster, trace_id=trace_id)
        except DistributionError as e:
            return e.to_dict()

        return {
            'status': 'success',
            'title': 'File Uploaded Successfully',
            'message': result.summary(),
            'result': result.to_dict()
        }


def distribute(upload: FileUpload, roster: Sequence[str], **kwargs) -> DistributionResult:
    """Atajo que construye una sesión nueva por llamada"""
    return DistributionSession(**kwargs).run(upload, roster)
