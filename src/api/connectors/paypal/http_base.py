"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Uma tentativa por chamada; retry é responsabilidade de quem chama.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._http_client = http_client

    def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
            )
        return self._http_client

    async def aclose(self) -> None:
        """Fecha o cliente HTTP subjacente, se criado."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def post_form(
        self,
        url: str,
        data: dict[str, str],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST ``application/x-www-form-urlencoded``.

        Raises:
            HttpError: Em timeout, falha de conexão ou status >= 400.
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        client = self._get_http_client()
        try:
            response = await client.post(
                url,
                data=data,
                headers=merged_headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.TransportError as exc:
            raise HttpError("http_connection_error") from exc

        if response.status_code >= 400:
            raise HttpError("http_error_status", status_code=response.status_code)
        return response
