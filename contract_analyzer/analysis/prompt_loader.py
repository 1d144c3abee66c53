from pathlib import Path

from contract_analyzer.analysis.exceptions import AnalysisError
from contract_analyzer.analysis.schemas import SchemaDescriptor

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(descriptor: SchemaDescriptor, prompt_dir: Path | None = None) -> str:
    """Load the system prompt for an analysis variant.

    Args:
        descriptor: Variant whose ``prompt_file`` should be read.
        prompt_dir: Directory holding prompt files.
                    Defaults to the bundled ``prompts`` directory.

    Returns:
        The prompt text with surrounding whitespace removed.

    Raises:
        AnalysisError: if the file cannot be read or is empty.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / descriptor.prompt_file
    try:
        text = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AnalysisError(f"Failed to load system prompt: {exc}") from exc
    if not text:
        raise AnalysisError(f"System prompt is empty: {path}")
    return text
