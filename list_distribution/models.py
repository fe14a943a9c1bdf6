"""
Modelos del motor de distribución
Registros, archivos recibidos y resultados inmutables
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class ContactRecord:
    """Fila de contacto ya parseada"""

    first_name: str = ''
    phone: str = ''
    notes: str = ''

    def to_dict(self) -> Dict[str, str]:
        return {
            'firstName': self.first_name,
            'phone': self.phone,
            'notes': self.notes
        }


@dataclass(frozen=True)
class FileUpload:
    """
    Archivo entregado por el selector de archivos del host

    `content` puede llegar como texto ya leído o como bytes crudos.
    """

    name: str
    declared_mime_type: str = ''
    content: Union[str, bytes] = ''


@dataclass(frozen=True)
class AgentGroup:
    """Porción contigua de registros asignada a un agente"""

    agent_id: str
    records: Tuple[ContactRecord, ...] = ()
    start: int = 0
    end: int = 0
    group_id: Optional[str] = None

    @property
    def record_count(self) -> int:
        return len(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'agentId': self.agent_id,
            'groupId': self.group_id,
            'recordCount': self.record_count,
            'range': {'start': self.start, 'end': self.end},
            'records': [record.to_dict() for record in self.records]
        }


@dataclass(frozen=True)
class DistributionResult:
    """
    Resultado inmutable de una distribución exitosa

    Invariantes:
        - un grupo por agente del roster, en el mismo orden
        - la suma de registros de los grupos es total_record_count
        - los grupos son porciones contiguas del archivo original
    """

    id: str
    source_name: str
    created_at: datetime
    total_record_count: int
    groups: Tuple[AgentGroup, ...] = field(default_factory=tuple)
    skipped_row_count: int = 0

    @property
    def agent_ids(self) -> List[str]:
        return [group.agent_id for group in self.groups]

    def group_for(self, agent_id: str) -> AgentGroup:
        """
        Obtiene el grupo de un agente

        Raises:
            KeyError: Si el agente no participó en la distribución
        """
        for group in self.groups:
            if group.agent_id == agent_id:
                return group
        raise KeyError(agent_id)

    def summary(self) -> str:
        return f"{self.total_record_count} items distributed among {len(self.groups)} agents."

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'sourceName': self.source_name,
            'createdAt': self.created_at.isoformat(),
            'totalRecordCount': self.total_record_count,
            'skippedRowCount': self.skipped_row_count,
            'groups': [group.to_dict() for group in self.groups]
        }
