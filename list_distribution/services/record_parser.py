"""
Record Parser - Parseo de texto delimitado a registros de contacto
Valida encabezados requeridos y mapea columnas por posición
"""

import csv
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from list_distribution.exceptions import FormatError, MissingColumnsError
from list_distribution.models import ContactRecord
from list_distribution.utils.config import Config, config as default_config
from list_distribution.utils.logger import setup_logger


# Token de búsqueda -> nombre de columna mostrado al usuario
REQUIRED_COLUMNS = (
    ('firstname', 'FirstName'),
    ('phone', 'Phone'),
    ('notes', 'Notes'),
)

MIN_FIELDS_PER_ROW = len(REQUIRED_COLUMNS)

_LINE_BREAK = re.compile(r'\r\n|\n|\r')


@dataclass(frozen=True)
class ParseReport:
    """Registros parseados más la contabilidad de filas descartadas"""

    records: Tuple[ContactRecord, ...] = ()
    header: Tuple[str, ...] = ()
    skipped_rows: int = 0
    skipped_line_numbers: Tuple[int, ...] = field(default_factory=tuple)


def decode_content(content: Union[str, bytes, bytearray], encoding: str = 'utf-8-sig') -> str:
    """
    Convierte el contenido recibido en texto

    Args:
        content: Texto ya leído o bytes crudos del archivo
        encoding: Codificación para bytes (utf-8-sig elimina el BOM)

    Returns:
        str: Contenido como texto

    Raises:
        FormatError: Si los bytes no se pueden decodificar (ej: XLSX binario)
    """
    if isinstance(content, str):
        return content[1:] if content.startswith('\ufeff') else content

    try:
        return bytes(content).decode(encoding)
    except UnicodeDecodeError as e:
        raise FormatError(
            f"file content is not valid {encoding} text: {e}",
            user_message='Failed to process the file. Binary spreadsheets must be exported as CSV.',
            context={'encoding': encoding}
        ) from e


def split_lines(content: str) -> List[Tuple[int, str]]:
    """Divide en líneas no vacías, conservando el número de línea (1-indexed)"""
    return [
        (number, line)
        for number, line in enumerate(_LINE_BREAK.split(content), start=1)
        if line.strip()
    ]


def find_missing_columns(header: List[str]) -> List[str]:
    """
    Busca columnas requeridas ausentes en el encabezado

    Basta con que algún campo contenga el token (ej: 'phone number').
    """
    lowered = [h.strip().lower() for h in header]
    return [
        display_name
        for token, display_name in REQUIRED_COLUMNS
        if not any(token in h for h in lowered)
    ]


class RecordParser:
    """
    Parser de archivos de contactos en texto delimitado

    Las filas de datos se mapean por posición: las tres primeras columnas son
    (nombre, teléfono, notas) sin importar el orden del encabezado. En modo
    simple el delimitador dentro de comillas también separa campos.
    """

    def __init__(self, delimiter: Optional[str] = None, quote_aware: Optional[bool] = None,
                 settings: Optional[Config] = None):
        settings = settings or default_config
        self.logger = setup_logger(__name__, 'record-parser', settings.APP_VERSION)
        self.delimiter = delimiter or settings.FIELD_DELIMITER
        self.quote_aware = settings.QUOTE_AWARE_PARSING if quote_aware is None else quote_aware

    def parse(self, content: str, trace_id: Optional[str] = None) -> List[ContactRecord]:
        """
        Parsea contenido delimitado en registros

        Args:
            content: Texto completo del archivo
            trace_id: ID de trazabilidad

        Returns:
            List[ContactRecord]: Registros en el orden del archivo

        Raises:
            FormatError: Si el contenido está vacío o faltan columnas requeridas
        """
        return list(self.parse_with_report(content, trace_id=trace_id).records)

    def parse_with_report(self, content: str, trace_id: Optional[str] = None) -> ParseReport:
        """Igual que parse() pero devuelve también las filas descartadas"""
        lines = split_lines(content or '')

        if not lines:
            self.logger.warning("Archivo vacío o solo con líneas en blanco", trace_id=trace_id)
            raise FormatError('empty input', user_message='No valid data found in the file')

        _, header_line = lines[0]
        header = [h.strip().lower() for h in self._split(header_line)]

        missing = find_missing_columns(header)
        if missing:
            self.logger.warning(
                "Encabezado sin columnas requeridas",
                context={'header': header, 'missing_columns': missing},
                trace_id=trace_id
            )
            raise MissingColumnsError(missing)

        records = []
        skipped = []

        for line_number, line in lines[1:]:
            values = [self._clean_cell(v) for v in self._split(line)]

            # Filas cortas se descartan sin error
            if len(values) < MIN_FIELDS_PER_ROW:
                skipped.append(line_number)
                continue

            records.append(ContactRecord(first_name=values[0], phone=values[1], notes=values[2]))

        if skipped:
            self.logger.debug(
                f"Filas descartadas por tener menos de {MIN_FIELDS_PER_ROW} campos",
                context={'skipped_rows': len(skipped), 'line_numbers': skipped[:10]},
                trace_id=trace_id
            )

        self.logger.info(
            "Archivo parseado",
            context={
                'total_records': len(records),
                'skipped_rows': len(skipped),
                'quote_aware': self.quote_aware
            },
            trace_id=trace_id
        )

        return ParseReport(
            records=tuple(records),
            header=tuple(header),
            skipped_rows=len(skipped),
            skipped_line_numbers=tuple(skipped)
        )

    def _split(self, line: str) -> List[str]:
        if self.quote_aware:
            try:
                return next(csv.reader([line], delimiter=self.delimiter, skipinitialspace=True), [])
            except csv.Error as e:
                raise FormatError(
                    f"malformed delimited line: {e}",
                    user_message='Failed to process the file. A row could not be read as CSV.',
                    context={'line_length': len(line)}
                ) from e
        return line.split(self.delimiter)

    @staticmethod
    def _clean_cell(value: str) -> str:
        return value.strip().replace('"', '')
