from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from contract_analyzer.analysis.exceptions import (
    CredentialMissingError,
    UpstreamError,
    UpstreamRateLimitedError,
    UpstreamUnavailableError,
)
from contract_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter

_MESSAGES = [
    {"role": "system", "content": "system"},
    {"role": "user", "content": "user"},
]
_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _status_error(error_cls: type[openai.APIStatusError], status: int) -> openai.APIStatusError:
    return error_cls(
        message=f"status {status}",
        response=httpx.Response(status, request=_REQUEST),
        body=None,
    )


def _call(adapter: OpenAIClientAdapter) -> str:
    return adapter.create_chat_completion(model="m", temperature=0.3, messages=_MESSAGES)


def _adapter_with(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "contract_analyzer.analysis.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response('{"ok": true}')
        assert _call(_adapter_with(mock_client)) == '{"ok": true}'

    def test_requests_json_object_with_messages(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("{}")
        _call(_adapter_with(mock_client))
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"] == _MESSAGES
        assert kwargs["temperature"] == 0.3
        assert kwargs["model"] == "m"

    def test_disables_sdk_retries_and_sets_timeout(self) -> None:
        with patch(
            "contract_analyzer.analysis.openai_client_adapter.openai.OpenAI"
        ) as mock_openai:
            OpenAIClientAdapter(api_key="k", timeout_seconds=12, base_url="https://x/v1")
        mock_openai.assert_called_once_with(
            api_key="k",
            timeout=12,
            base_url="https://x/v1",
            max_retries=0,
        )

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        with pytest.raises(UpstreamError, match="empty response"):
            _call(_adapter_with(mock_client))

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(UpstreamError, match="no choices"):
            _call(_adapter_with(mock_client))


class TestCredential:
    def test_missing_key_raises_before_network(self) -> None:
        with patch(
            "contract_analyzer.analysis.openai_client_adapter.openai.OpenAI"
        ) as mock_openai:
            adapter = OpenAIClientAdapter(api_key="", timeout_seconds=30)
            with pytest.raises(CredentialMissingError):
                _call(adapter)
        mock_openai.assert_not_called()

    def test_require_credential_raises_without_key(self) -> None:
        adapter = OpenAIClientAdapter(api_key="", timeout_seconds=30)
        with pytest.raises(CredentialMissingError):
            adapter.require_credential()

    def test_require_credential_passes_with_key(self) -> None:
        adapter = _adapter_with(MagicMock())
        adapter.require_credential()


class TestErrorClassification:
    def test_rate_limit_raises_rate_limited(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(openai.RateLimitError, 429)
        with pytest.raises(UpstreamRateLimitedError):
            _call(_adapter_with(mock_client))

    def test_authentication_error_is_credential_rejection(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.AuthenticationError, 401
        )
        with pytest.raises(UpstreamUnavailableError) as info:
            _call(_adapter_with(mock_client))
        assert info.value.credential_rejected is True

    def test_connection_error_raises_unavailable(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=_REQUEST
        )
        with pytest.raises(UpstreamUnavailableError, match="network error") as info:
            _call(_adapter_with(mock_client))
        assert info.value.credential_rejected is False

    def test_sdk_timeout_raises_unavailable(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APITimeoutError(request=_REQUEST)
        with pytest.raises(UpstreamUnavailableError):
            _call(_adapter_with(mock_client))

    def test_httpx_timeout_raises_unavailable(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(UpstreamUnavailableError, match="network error"):
            _call(_adapter_with(mock_client))

    def test_server_error_raises_unavailable(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.InternalServerError, 503
        )
        with pytest.raises(UpstreamUnavailableError, match="server error"):
            _call(_adapter_with(mock_client))

    def test_other_api_error_raises_generic_upstream_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.BadRequestError, 400
        )
        with pytest.raises(UpstreamError, match="API error") as info:
            _call(_adapter_with(mock_client))
        assert not isinstance(info.value, (UpstreamRateLimitedError, UpstreamUnavailableError))
