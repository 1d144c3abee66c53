"""Example completion client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from contract_analyzer.analysis.client_base import BaseCompletionClient
from contract_analyzer.analysis.schemas import CONSTRUCTION, GENERAL, SchemaDescriptor


class ExampleClientAdapter(BaseCompletionClient):
    """Offline adapter that returns a fixed, valid analysis for its variant.

    No network calls and no credential. Useful for local development and tests.
    """

    RESPONSES: ClassVar[dict[str, dict[str, object]]] = {
        CONSTRUCTION.name: {
            "contractor_protection_score": 62,
            "overall_risk": "Medium",
            "contract_type": "Subcontract Agreement",
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
                    "finding": "Pay-if-paid clause shifts owner non-payment risk",
                    "impact": "Contractor may never be paid for completed work",
                    "action": "Negotiate pay-when-paid with a fixed outside date",
                }
            ],
            "field_team_alerts": ["Document every change directive in writing"],
            "industry_benchmarks": {"retention": "10% (industry norm 5-10%)"},
            "recommendations": ["Cap retention at 5%"],
        },
        GENERAL.name: {
            "contract_type": "Service Agreement",
            "overall_risk": "Medium",
            "risk_score": 55,
            "payment_terms": "Net 45 from invoice approval.",
            "liability": "Uncapped indemnification by the provider.",
            "termination": "Either party on 30 days written notice.",
            "insurance": "Not addressed.",
            "key_risks": ["Uncapped indemnity"],
            "recommendations": ["Add a liability cap equal to fees paid"],
        },
    }

    def __init__(self, descriptor: SchemaDescriptor = CONSTRUCTION) -> None:
        self._descriptor = descriptor

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, str]],
    ) -> str:
        _ = model, temperature, messages
        return json.dumps(self.RESPONSES[self._descriptor.name])
