from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from contract_analyzer.analysis.analyzer import ContractAnalyzer
from contract_analyzer.analysis.prompt_loader import load_system_prompt
from contract_analyzer.analysis.schemas import CONSTRUCTION
from contract_analyzer.api.app import create_app
from contract_analyzer.config.settings import Settings


@pytest.fixture()
def completion_client() -> MagicMock:
    """Completion client double; configure create_chat_completion per test."""
    return MagicMock()


@pytest.fixture()
def api_client(completion_client: MagicMock) -> Iterator[TestClient]:
    settings = Settings(analysis_provider="example", service_name="Test Analyzer")
    analyzer = ContractAnalyzer(
        client=completion_client,
        model="test-model",
        descriptor=CONSTRUCTION,
        system_prompt=load_system_prompt(CONSTRUCTION),
    )
    with TestClient(create_app(settings, analyzer=analyzer)) as client:
        yield client
