from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx

from yeuai.client import config
from yeuai.client.errors import MalformedResponseError
from yeuai.nlu.parser import parse as parse_text
from yeuai.nlu.schema import ParseResponse
from yeuai.observability.logs import log_event
from yeuai.observability.metrics import record_error, record_request


class YeuAIClient:
    """
    Async client for the yeu.ai Vietnamese NLP service.

    Every call posts the text as the `text` query parameter and returns the
    decoded JSON body. Nothing is retried: transport errors and non-2xx
    answers surface as the matching httpx exception.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        hostname: str = config.YEUAI_HOSTNAME,
        endpoint: str = config.YEUAI_ENDPOINT,
        secure: bool = config.YEUAI_SECURE,
        request_source: str = config.YEUAI_REQUEST_SOURCE,
        timeout: Optional[float] = config.YEUAI_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.access_token = access_token if access_token is not None else config.YEUAI_ACCESS_TOKEN
        self.hostname = hostname
        self.endpoint = "/" + endpoint.strip("/") if endpoint.strip("/") else ""
        self.secure = secure
        self.request_source = request_source
        # caller-owned clients are left open
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def __aenter__(self) -> "YeuAIClient":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "api-request-source": self.request_source,
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def url(self, service: str) -> str:
        scheme = "https" if self.secure else "http"
        return f"{scheme}://{self.hostname}{self.endpoint}/{service}"

    async def _call(self, method: str, service: str, text: str) -> Any:
        try:
            resp = await self._http.request(
                method, self.url(service), headers=self._headers(), params={"text": text},
            )
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPStatusError as e:
            record_request(service, str(e.response.status_code))
            record_error(type(e).__name__)
            log_event("tagger_error", logging.WARNING, service=service, status=e.response.status_code,
                      error_type=type(e).__name__)
            raise
        except httpx.HTTPError as e:
            record_request(service, "transport_error")
            record_error(type(e).__name__)
            log_event("tagger_error", logging.WARNING, service=service, error_type=type(e).__name__)
            raise
        except ValueError as e:
            record_request(service, "malformed")
            record_error("MalformedResponseError")
            log_event("tagger_error", logging.WARNING, service=service, error_type="MalformedResponseError")
            raise MalformedResponseError(f"{service}: body is not JSON") from e

        record_request(service, "ok")
        log_event("tagger_response", service=service, status=resp.status_code, text_len=len(text))
        return body

    async def word_tokenize(self, text: str) -> Any:
        """Word segmentation (tách từ)."""
        return await self._call("POST", "tok", text)

    async def pos_tag(self, text: str) -> Any:
        """Part-of-speech tagging (gán nhãn từ loại)."""
        return await self._call("POST", "tag", text)

    async def chunk(self, text: str) -> Any:
        return await self._call("POST", "chunk", text)

    async def ner(self, text: str) -> Any:
        """Named entity recognition; rows are [word, pos, chunk, ner]."""
        return await self._call("POST", "ner", text)

    async def classify_qtype(self, text: str) -> Any:
        """Question analysis: WH-type and topic of a Vietnamese question."""
        return await self._call("GET", "qtype", text)

    async def parse(self, text: str) -> ParseResponse:
        """Nouns, pronouns, verbs, adverbs, adjectives and entities of `text`."""
        return ParseResponse(data=await parse_text(text, self))
