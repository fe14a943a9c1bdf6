"""
UUID Generator - Generador de identificadores únicos
Responsable de crear identificadores de distribuciones y de grupos por agente
"""

import uuid
from datetime import datetime
from typing import Optional

from list_distribution.utils.logger import setup_logger


# Namespace para identificadores de grupo (derivados, reproducibles)
GROUP_NAMESPACE = uuid.UUID('6ba7b810-9dad-11d1-80b4-00c04fd430c8')


class UUIDGenerator:
    """
    Generador de UUIDs para distribuciones
    UUID4 para cada distribución, UUID5 para cada grupo dentro de ella
    """

    def __init__(self):
        self.logger = setup_logger(__name__, 'uuid-generator')

    def generate_distribution_uuid(self, source_name: str, timestamp: Optional[datetime] = None) -> str:
        """
        Genera UUID principal de una distribución

        Args:
            source_name: Nombre del archivo original
            timestamp: Timestamp opcional (solo para trazas)

        Returns:
            str: UUID de la distribución
        """
        distribution_uuid = str(uuid.uuid4())

        self.logger.debug(
            "UUID de distribución generado",
            context={
                'distribution_uuid': distribution_uuid,
                'source_name': source_name,
                'timestamp': timestamp.isoformat() if timestamp else None
            }
        )

        return distribution_uuid

    def generate_group_uuid(self, distribution_uuid: str, position: int, agent_id: str) -> str:
        """
        Genera UUID determinístico para el grupo de un agente

        Args:
            distribution_uuid: UUID de la distribución padre
            position: Posición del agente en el roster (0-indexed)
            agent_id: Identificador del agente

        Returns:
            str: UUID del grupo
        """
        name = f"{distribution_uuid}-group-{position}-{agent_id}"
        return str(uuid.uuid5(GROUP_NAMESPACE, name))

    def generate_trace_id(self) -> str:
        """Genera ID de trazabilidad para seguimiento de una distribución"""
        return str(uuid.uuid4())

    def validate_uuid_format(self, uuid_string: str) -> bool:
        """
        Valida formato de UUID

        Args:
            uuid_string: String a validar

        Returns:
            bool: True si es formato UUID válido
        """
        try:
            uuid.UUID(uuid_string)
            return True
        except (ValueError, TypeError, AttributeError):
            self.logger.warning(f"UUID inválido: {uuid_string}")
            return False
