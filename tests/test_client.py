import asyncio
import logging
import httpx
import pytest

from yeuai.client.errors import MalformedResponseError
from yeuai.client.tagger import YeuAIClient
from yeuai.observability.logs import get_logger

ROWS = [["Tôi", "P", "B-NP", "O"], ["yêu", "V", "B-VP", "O"], ["Việt_Nam", "Np", "B-NP", "B-LOC"]]


def make_client(handler, **opts):
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return YeuAIClient("secret-token", http_client=http, **opts)


def run(coro):
    return asyncio.run(coro)


def test_request_shape():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"response": ROWS})

    async def go():
        c = make_client(handler, hostname="nlp.example.vn", endpoint="api/v1/", request_source="tests")
        await c.ner("Tôi yêu Việt Nam")
        await c.classify_qtype("Ai là tác giả?")

    run(go())
    ner, qtype = seen
    assert ner.method == "POST"
    assert str(ner.url).startswith("https://nlp.example.vn/api/v1/ner?")
    assert ner.url.params["text"] == "Tôi yêu Việt Nam"
    assert ner.headers["Authorization"] == "Bearer secret-token"
    assert ner.headers["Accept"] == "application/json"
    assert ner.headers["api-request-source"] == "tests"
    assert qtype.method == "GET" and qtype.url.path == "/api/v1/qtype"

@pytest.mark.parametrize("method,service", [
    ("word_tokenize", "tok"), ("pos_tag", "tag"), ("chunk", "chunk"), ("ner", "ner"),
])
def test_each_service_posts_to_its_path(method, service):
    def handler(request):
        assert request.method == "POST"
        assert request.url.path == f"/api/v1/{service}"
        return httpx.Response(200, json={"service": service})

    assert run(getattr(make_client(handler), method)("xin chào")) == {"service": service}

def test_insecure_and_no_token():
    c = YeuAIClient("", secure=False, hostname="localhost:8080",
                    http_client=httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200))))
    assert c.url("tag") == "http://localhost:8080/api/v1/tag"
    assert "Authorization" not in c._headers()

def test_parse_returns_envelope():
    out = run(make_client(lambda r: httpx.Response(200, json={"response": ROWS})).parse("Tôi yêu Việt Nam"))
    assert out.success is True
    assert out.data.pronouns == ["Tôi"]
    assert out.data.verbs == ["yêu"]
    assert out.data.nouns == ["Việt_Nam"]
    assert out.data.entities == ["Việt_Nam"]

def test_server_error_propagates():
    c = make_client(lambda r: httpx.Response(503, json={"error": "busy"}))
    with pytest.raises(httpx.HTTPStatusError) as exc:
        run(c.parse("x"))
    assert exc.value.response.status_code == 503

def test_transport_error_propagates():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(httpx.ConnectError):
        run(make_client(handler).parse("x"))

def test_non_json_body_is_malformed():
    c = make_client(lambda r: httpx.Response(200, content=b"<html>oops</html>"))
    with pytest.raises(MalformedResponseError):
        run(c.ner("x"))

def test_owned_http_client_closed_on_exit():
    async def go():
        async with YeuAIClient("t") as c:
            http = c._http
        return http

    assert run(go()).is_closed

def test_injected_http_client_left_open():
    http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))

    async def go():
        async with YeuAIClient("t", http_client=http):
            pass

    run(go())
    assert not http.is_closed

def test_upstream_errors_logged_as_warning():
    records = []

    class Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = get_logger()
    handler = Collect()
    logger.addHandler(handler)
    try:
        with pytest.raises(httpx.HTTPStatusError):
            run(make_client(lambda r: httpx.Response(500)).ner("x"))
    finally:
        logger.removeHandler(handler)
    errors = [r for r in records if getattr(r, "event", None) == "tagger_error"]
    assert errors and all(r.levelno == logging.WARNING for r in errors)
