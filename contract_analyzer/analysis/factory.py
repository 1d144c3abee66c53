from contract_analyzer.analysis.analyzer import ContractAnalyzer
from contract_analyzer.analysis.client_base import BaseCompletionClient
from contract_analyzer.analysis.example_client_adapter import ExampleClientAdapter
from contract_analyzer.analysis.models import ValidationLimits
from contract_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter
from contract_analyzer.analysis.prompt_loader import load_system_prompt
from contract_analyzer.analysis.schemas import SchemaDescriptor, get_descriptor
from contract_analyzer.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured contract analyzer."""

    PROVIDERS = ("example", "openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> ContractAnalyzer:
        """Create a configured analyzer from application settings."""
        descriptor = get_descriptor(settings.analysis_variant)
        provider = settings.analysis_provider.lower()
        client = cls._create_client(provider, descriptor, settings)
        return ContractAnalyzer(
            client=client,
            model="example" if provider == "example" else settings.openai_model_name,
            descriptor=descriptor,
            system_prompt=load_system_prompt(descriptor),
            temperature=settings.openai_temperature,
            limits=ValidationLimits(
                max_file_size_bytes=settings.max_file_size_bytes,
                min_text_chars=settings.min_text_chars,
                max_text_chars=settings.max_text_chars,
            ),
        )

    @classmethod
    def _create_client(
        cls,
        provider: str,
        descriptor: SchemaDescriptor,
        settings: Settings,
    ) -> BaseCompletionClient:
        if provider == "example":
            return ExampleClientAdapter(descriptor)
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @staticmethod
    def _resolve_base_url(provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        url = settings.openai_compatible_base_url.strip()
        if not url:
            raise ValueError(
                "openai_compatible_base_url is required for analysis_provider=openai_compatible"
            )
        return url
