"""
Configuration and fixtures for pytest testing suite.
Provides shared contact files, rosters and a deterministic clock.
"""
import pytest
from datetime import datetime

from list_distribution.models import ContactRecord, FileUpload
from list_distribution.utils.config import Config


CSV_MIME = 'text/csv'


@pytest.fixture
def settings(monkeypatch):
    """Fresh configuration built from a clean environment."""
    for name in ('ALLOWED_MIME_TYPES', 'ALLOWED_EXTENSIONS', 'FIELD_DELIMITER',
                 'FILE_ENCODING', 'QUOTE_AWARE_PARSING', 'LOG_FORMAT'):
        monkeypatch.delenv(name, raising=False)
    return Config()


@pytest.fixture
def roster():
    """Roster of five agents, as used by the list distribution dashboard."""
    return ['John Doe', 'Jane Smith', 'Mike Johnson', 'Sarah Wilson', 'David Brown']


@pytest.fixture
def sample_csv():
    """Seven valid contacts with a trailing blank line."""
    rows = [
        'FirstName,Phone,Notes',
        'Alice,555-0101,Call after 5pm',
        'Bob,555-0102,Prefers email',
        'Carol,555-0103,',
        'Dan,555-0104,VIP',
        'Eve,555-0105,Follow up',
        'Frank,555-0106,New lead',
        'Grace,555-0107,Spanish speaker',
    ]
    return '\n'.join(rows) + '\n'


@pytest.fixture
def make_records():
    """Factory for simple sequential records."""
    def _make(count):
        return [
            ContactRecord(first_name=f'Contact {i}', phone=f'555-{i:04d}', notes='')
            for i in range(count)
        ]
    return _make


@pytest.fixture
def csv_upload(sample_csv):
    """Upload wrapper around the sample CSV."""
    return FileUpload(name='contacts.csv', declared_mime_type=CSV_MIME, content=sample_csv)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    instant = datetime(2024, 3, 15, 10, 30, 0)
    return lambda: instant
