"""Schema descriptors: one per prompt variant.

A descriptor ties a system prompt file to the set of fields the model must
return under that prompt. Adding a variant means adding a descriptor here and a
prompt file under ``prompts/``.
"""

from dataclasses import dataclass
from enum import Enum


class FieldShape(str, Enum):
    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    OBJECT = "object"

    def matches(self, value: object) -> bool:
        if self is FieldShape.STRING:
            return isinstance(value, str)
        if self is FieldShape.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is FieldShape.ARRAY:
            return isinstance(value, list)
        return isinstance(value, dict)


@dataclass(frozen=True)
class RequiredField:
    name: str
    shape: FieldShape


@dataclass(frozen=True)
class SchemaDescriptor:
    """Required-field contract and prompt settings for one analysis variant."""

    name: str
    version: str
    prompt_file: str
    user_preamble: str
    required_fields: tuple[RequiredField, ...]
    max_prompt_chars: int | None = None
    include_text_length: bool = False

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.required_fields]


CONSTRUCTION = SchemaDescriptor(
    name="construction",
    version="1.0",
    prompt_file="construction_system_prompt.txt",
    user_preamble=(
        "Analyze this construction contract focusing on industry standards "
        "and contractor protection:\n\n"
    ),
    required_fields=(
        RequiredField("contractor_protection_score", FieldShape.NUMBER),
        RequiredField("overall_risk", FieldShape.STRING),
        RequiredField("contract_type", FieldShape.STRING),
        RequiredField("risk_breakdown", FieldShape.OBJECT),
        RequiredField("critical_findings", FieldShape.ARRAY),
        RequiredField("field_team_alerts", FieldShape.ARRAY),
        RequiredField("industry_benchmarks", FieldShape.OBJECT),
        RequiredField("recommendations", FieldShape.ARRAY),
    ),
)

GENERAL = SchemaDescriptor(
    name="general",
    version="1.0",
    prompt_file="general_system_prompt.txt",
    user_preamble="Analyze this contract:\n\n",
    required_fields=(
        RequiredField("contract_type", FieldShape.STRING),
        RequiredField("overall_risk", FieldShape.STRING),
        RequiredField("risk_score", FieldShape.NUMBER),
        RequiredField("payment_terms", FieldShape.STRING),
        RequiredField("liability", FieldShape.STRING),
        RequiredField("termination", FieldShape.STRING),
        RequiredField("insurance", FieldShape.STRING),
        RequiredField("key_risks", FieldShape.ARRAY),
        RequiredField("recommendations", FieldShape.ARRAY),
    ),
    max_prompt_chars=20_000,
    include_text_length=True,
)

VARIANTS: dict[str, SchemaDescriptor] = {
    CONSTRUCTION.name: CONSTRUCTION,
    GENERAL.name: GENERAL,
}


def get_descriptor(variant: str) -> SchemaDescriptor:
    descriptor = VARIANTS.get(variant.lower())
    if descriptor is None:
        raise ValueError(
            f"Unknown analysis variant '{variant}'. Choose from: {sorted(VARIANTS)}"
        )
    return descriptor
