"""
Pytest configuration and shared fixtures.

Key fixtures:
- reference_now: Fixed reference time (Tuesday 2026-03-10 09:00)
- friday_now: Fixed reference time that falls on a Friday (2026-03-13)
- created_at: Document creation timestamp
- meeting_info: MeetingInfo for a sample document
- sample_notes: Meeting notes exercising both extraction passes
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Load environment variables
from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from meeting_action_items.models.action_item import MeetingInfo  # noqa: E402


@pytest.fixture
def reference_now() -> datetime:
    """A Tuesday morning."""
    return datetime(2026, 3, 10, 9, 0, 0)


@pytest.fixture
def friday_now() -> datetime:
    """A Friday afternoon."""
    return datetime(2026, 3, 13, 15, 30, 0)


@pytest.fixture
def created_at() -> datetime:
    return datetime(2026, 3, 9, 14, 0, 0)


@pytest.fixture
def meeting_info(created_at: datetime) -> MeetingInfo:
    return MeetingInfo(
        title='Weekly Sync',
        date=created_at,
        document_url='https://docs.example.com/d/weekly-sync',
    )


@pytest.fixture
def sample_notes() -> str:
    """Meeting notes with inline cues and a suggested-next-steps section."""
    return """
Weekly Sync
Date: March 9, 2026

Resumo
Filipe will send the report by Friday.
Maria to review the budget.
@Filipe: book the venue for the offsite

Próximas etapas sugeridas
- Filipe: revisar contrato
Filipe alinha o cronograma com o time de dados
Maria prepara a apresentação
DETALHES
Filipe comentou sobre o orçamento do trimestre
""".strip()
