"""
Unit tests for the Partitioner.
Even contiguous splitting, remainder placement and roster validation.
"""
import pytest
from unittest.mock import MagicMock

from list_distribution.exceptions import ConfigError
from list_distribution.services.partitioner import Partitioner, compute_group_sizes


@pytest.fixture
def partitioner():
    return Partitioner()


class TestGroupSizes:
    """Test size computation."""

    def test_seven_records_three_agents(self):
        """Remainder goes to the earliest roster entries."""
        assert compute_group_sizes(7, 3) == [3, 2, 2]

    def test_exact_division(self):
        assert compute_group_sizes(10, 5) == [2, 2, 2, 2, 2]

    def test_fewer_records_than_agents(self):
        assert compute_group_sizes(2, 5) == [1, 1, 0, 0, 0]

    def test_zero_agents_raises_config_error(self):
        with pytest.raises(ConfigError, match='no agents available'):
            compute_group_sizes(5, 0)


class TestPartition:
    """Test record assignment."""

    def test_seven_records_three_agents_contiguous(self, partitioner, make_records):
        records = make_records(7)
        groups = partitioner.partition(records, ['a', 'b', 'c'])

        assert [g.agent_id for g in groups] == ['a', 'b', 'c']
        assert [g.record_count for g in groups] == [3, 2, 2]
        assert list(groups[0].records) == records[0:3]
        assert list(groups[1].records) == records[3:5]
        assert list(groups[2].records) == records[5:7]
        assert [(g.start, g.end) for g in groups] == [(0, 3), (3, 5), (5, 7)]

    @pytest.mark.parametrize('total_records', [0, 1, 4, 5, 6, 23, 100])
    @pytest.mark.parametrize('total_agents', [1, 2, 5, 7])
    def test_totals_balance_and_order(self, partitioner, make_records, total_records, total_agents):
        records = make_records(total_records)
        roster = [f'agent-{i}' for i in range(total_agents)]

        groups = partitioner.partition(records, roster)
        sizes = [g.record_count for g in groups]

        assert len(groups) == total_agents
        assert sum(sizes) == total_records
        assert max(sizes) - min(sizes) <= 1
        assert [r for g in groups for r in g.records] == records

    def test_empty_records_give_empty_groups(self, partitioner):
        groups = partitioner.partition([], ['a', 'b'])
        assert [g.records for g in groups] == [(), ()]

    def test_empty_roster_raises_config_error(self, partitioner, make_records):
        with pytest.raises(ConfigError, match='no agents available'):
            partitioner.partition(make_records(3), [])

    def test_duplicate_agents_raise_config_error(self, partitioner, make_records):
        with pytest.raises(ConfigError) as exc_info:
            partitioner.partition(make_records(3), ['a', 'b', 'a'])

        assert exc_info.value.context['duplicates'] == ['a']

    def test_partition_is_deterministic(self, partitioner, make_records):
        records = make_records(11)
        roster = ['x', 'y', 'z']

        first = partitioner.partition(records, roster, distribution_id='dist-1')
        second = partitioner.partition(records, roster, distribution_id='dist-1')

        assert first == second

    def test_group_ids_derived_from_distribution(self, partitioner, make_records):
        groups = partitioner.partition(make_records(4), ['a', 'b'], distribution_id='dist-1')
        other = partitioner.partition(make_records(4), ['a', 'b'], distribution_id='dist-2')

        assert groups[0].group_id != groups[1].group_id
        assert groups[0].group_id != other[0].group_id

    def test_group_ids_absent_without_distribution(self, partitioner, make_records):
        groups = partitioner.partition(make_records(2), ['a'])
        assert groups[0].group_id is None


    def test_completion_logged_with_group_sizes(self, partitioner, make_records):
        partitioner.logger = MagicMock()

        partitioner.partition(make_records(7), ['a', 'b', 'c'], trace_id='trace-1')

        partitioner.logger.success.assert_called_once()
        kwargs = partitioner.logger.success.call_args.kwargs
        assert kwargs['context']['group_sizes'] == [3, 2, 2]
        assert kwargs['trace_id'] == 'trace-1'
