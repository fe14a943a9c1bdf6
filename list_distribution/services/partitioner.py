"""
Partitioner - División de registros entre agentes
Reparte porciones contiguas lo más parejas posible, el resto va a los primeros agentes
"""

from typing import List, Optional, Sequence

from list_distribution.exceptions import ConfigError
from list_distribution.models import AgentGroup, ContactRecord
from list_distribution.services.uuid_generator import UUIDGenerator
from list_distribution.utils.logger import setup_logger


def compute_group_sizes(total_records: int, total_agents: int) -> List[int]:
    """
    Calcula el tamaño de cada grupo

    Args:
        total_records: Cantidad de registros (n)
        total_agents: Cantidad de agentes (k), debe ser >= 1

    Returns:
        List[int]: k tamaños; los primeros n % k reciben uno extra

    Raises:
        ConfigError: Si no hay agentes
    """
    if total_agents <= 0:
        raise ConfigError('no agents available', user_message='No agents available to distribute the list.')

    base, remainder = divmod(total_records, total_agents)
    return [base + 1 if index < remainder else base for index in range(total_agents)]


class Partitioner:
    """
    Divide una secuencia de registros en grupos contiguos, uno por agente
    El resultado depende solo de los registros y del orden del roster
    """

    def __init__(self, uuid_generator: Optional[UUIDGenerator] = None):
        self.logger = setup_logger(__name__, 'partitioner')
        self.uuid_generator = uuid_generator or UUIDGenerator()

    def partition(self, records: Sequence[ContactRecord], roster: Sequence[str],
                  distribution_id: Optional[str] = None,
                  trace_id: Optional[str] = None) -> List[AgentGroup]:
        """
        Asigna cada registro a exactamente un agente

        Args:
            records: Registros en el orden del archivo
            roster: Identificadores de agentes, en orden de asignación
            distribution_id: UUID de la distribución (para derivar IDs de grupo)
            trace_id: ID de trazabilidad

        Returns:
            List[AgentGroup]: Un grupo por agente, en el orden del roster

        Raises:
            ConfigError: Si el roster está vacío o tiene agentes repetidos
        """
        roster = list(roster)
        self._validate_roster(roster, trace_id)

        sizes = compute_group_sizes(len(records), len(roster))
        groups = []
        start = 0

        for position, (agent_id, size) in enumerate(zip(roster, sizes)):
            end = start + size
            group_id = None
            if distribution_id:
                group_id = self.uuid_generator.generate_group_uuid(distribution_id, position, agent_id)

            groups.append(AgentGroup(
                agent_id=agent_id,
                records=tuple(records[start:end]),
                start=start,
                end=end,
                group_id=group_id
            ))
            start = end

        self.logger.success(
            "División completada",
            context={
                'total_records': len(records),
                'total_agents': len(roster),
                'group_sizes': sizes
            },
            trace_id=trace_id
        )

        return groups

    def _validate_roster(self, roster: List[str], trace_id: Optional[str] = None):
        if not roster:
            self.logger.error("Roster de agentes vacío", trace_id=trace_id)
            raise ConfigError('no agents available', user_message='No agents available to distribute the list.')

        seen = set()
        duplicates = []
        for agent_id in roster:
            if agent_id in seen and agent_id not in duplicates:
                duplicates.append(agent_id)
            seen.add(agent_id)

        if duplicates:
            self.logger.error(
                "Roster con agentes repetidos",
                context={'duplicates': duplicates},
                trace_id=trace_id
            )
            raise ConfigError(
                f"duplicate agent identifiers: {', '.join(map(str, duplicates))}",
                user_message='Each agent can appear only once in the roster.',
                context={'duplicates': duplicates}
            )
