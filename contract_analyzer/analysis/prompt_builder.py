from contract_analyzer.analysis.models import AnalysisRequestMessages, ExtractedText
from contract_analyzer.analysis.schemas import SchemaDescriptor


def build_messages(
    text: ExtractedText,
    descriptor: SchemaDescriptor,
    system_prompt: str,
) -> AnalysisRequestMessages:
    """Render the system/user message pair for one analysis request.

    Runs after validation, so truncating to the variant's prompt budget only
    shortens what the model sees.
    """
    body = text.text
    if descriptor.max_prompt_chars is not None:
        body = body[: descriptor.max_prompt_chars]
    return AnalysisRequestMessages(
        system=system_prompt,
        user=f"{descriptor.user_preamble}{body}",
    )
