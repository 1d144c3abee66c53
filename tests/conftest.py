import json

import pytest

from contract_analyzer.analysis.models import UploadedArtifact

CONTRACT_TEXT = (
    "Subcontractor shall be paid within 60 days after Owner pays Contractor. "
    "Retention of 10% applies until final completion."
)


@pytest.fixture()
def contract_text() -> str:
    """A short plain-text contract, 120 characters long."""
    assert len(CONTRACT_TEXT) == 120
    return CONTRACT_TEXT


@pytest.fixture()
def text_artifact(contract_text: str) -> UploadedArtifact:
    return UploadedArtifact(
        filename="subcontract.txt",
        content_type="text/plain",
        content=contract_text.encode("utf-8"),
    )


@pytest.fixture()
def construction_payload() -> dict[str, object]:
    """A complete model response for the construction variant."""
    return {
        "contractor_protection_score": 48,
        "overall_risk": "High",
        "contract_type": "Subcontract",
        "risk_breakdown": {
            "payment_risk": "High",
            "liability_risk": "Medium",
            "scope_risk": "Low",
            "timeline_risk": "Medium",
        },
        "critical_findings": [
            {
                "category": "Payment",
                "risk_level": "High",
                "finding": "Pay-when-paid with 60 day lag",
                "impact": "Cash flow strain",
                "action": "Negotiate Net 30",
            }
        ],
        "field_team_alerts": ["Track owner payment dates"],
        "industry_benchmarks": {"retention": "10% vs 5-10% norm"},
        "recommendations": ["Reduce retention to 5%"],
    }


@pytest.fixture()
def general_payload() -> dict[str, object]:
    """A complete model response for the general variant."""
    return {
        "contract_type": "Subcontract",
        "overall_risk": "Medium",
        "risk_score": 57,
        "payment_terms": "Paid 60 days after owner pays.",
        "liability": "Not addressed.",
        "termination": "Not addressed.",
        "insurance": "Not addressed.",
        "key_risks": ["Payment depends on owner"],
        "recommendations": ["Add an outside payment date"],
    }


@pytest.fixture()
def construction_response(construction_payload: dict[str, object]) -> str:
    return json.dumps(construction_payload)
