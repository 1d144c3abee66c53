from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific chat completion clients."""

    def require_credential(self) -> None:
        """Raise CredentialMissingError if the client cannot authenticate.

        Called before any network call. Clients without credentials accept by default.
        """

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, str]],
    ) -> str:
        """Return the provider's first choice content as plain text.

        Raises:
            CredentialMissingError: no API key is configured.
            UpstreamRateLimitedError: the provider reports rate limiting.
            UpstreamUnavailableError: connection, timeout, auth or server failure.
            UpstreamError: any other provider failure.
        """
