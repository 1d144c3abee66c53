import httpx
import openai

from contract_analyzer.analysis.client_base import BaseCompletionClient
from contract_analyzer.analysis.exceptions import (
    CredentialMissingError,
    UpstreamError,
    UpstreamRateLimitedError,
    UpstreamUnavailableError,
)


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API.

    The SDK's own retries are disabled so each request makes exactly one call.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._client: openai.OpenAI | None = None
        if api_key:
            self._client = openai.OpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
                max_retries=0,
            )

    def require_credential(self) -> None:
        self._require_client()

    def _require_client(self) -> openai.OpenAI:
        if not self._api_key or self._client is None:
            raise CredentialMissingError("OpenAI API key not configured")
        return self._client

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        messages: list[dict[str, str]],
    ) -> str:
        client = self._require_client()
        try:
            response = client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={"type": "json_object"},
                messages=messages,  # type: ignore[arg-type]
            )
        except openai.RateLimitError as exc:
            raise UpstreamRateLimitedError(f"AI provider rate limit: {exc}") from exc
        except (openai.AuthenticationError, openai.PermissionDeniedError) as exc:
            raise UpstreamUnavailableError(
                f"AI provider rejected credential: {exc}",
                credential_rejected=True,
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise UpstreamUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.InternalServerError as exc:
            raise UpstreamUnavailableError(f"AI provider server error: {exc}") from exc
        except openai.APIError as exc:
            raise UpstreamError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise UpstreamError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise UpstreamError("AI returned empty response")
        return content
