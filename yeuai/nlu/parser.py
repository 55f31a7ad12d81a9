from __future__ import annotations
from typing import Any, Dict, Iterable, Protocol

from yeuai.client.errors import MalformedResponseError
from yeuai.nlu.extractor import (
    match_adjectives, match_adverbs, match_entities, match_nouns, match_pronouns, match_verbs,
)
from yeuai.nlu.schema import ParseResult, Token, ner_view, pos_view
from yeuai.observability.logs import log_event
from yeuai.observability.metrics import record_error, record_phrases, timer_observe_ms, timer_start


class Tagger(Protocol):
    async def ner(self, text: str) -> Dict[str, Any]: ...


def build_result(rows: Iterable[Any]) -> ParseResult:
    """Token rows from the ner service -> the six phrase lists."""
    tokens = [Token.from_row(r) for r in rows]
    pos_tags = pos_view(tokens)
    ner_tags = ner_view(tokens)
    return ParseResult(
        nouns=match_nouns(pos_tags),
        pronouns=match_pronouns(pos_tags),
        verbs=match_verbs(pos_tags),
        adverbs=match_adverbs(pos_tags),
        adjectives=match_adjectives(pos_tags),
        entities=match_entities(ner_tags),
    )


def _token_rows(body: Any) -> list:
    if not isinstance(body, dict) or not isinstance(body.get("response"), list):
        raise MalformedResponseError("ner body has no 'response' token list")
    return body["response"]


async def parse(text: str, tagger: Tagger) -> ParseResult:
    """
    One ner call, then POS phrases from the POS tags and entities from the
    NER tags. Errors from the tagger reach the caller as raised.
    """
    t0 = timer_start()
    try:
        # failures of the call itself are counted by the client
        body = await tagger.ner(text)
        try:
            rows = _token_rows(body)
            result = build_result(rows)
        except MalformedResponseError as e:
            record_error(type(e).__name__)
            raise
    finally:
        elapsed_ms = timer_observe_ms(t0)

    counts = result.model_dump()
    record_phrases(counts)
    log_event(
        "parse_done",
        text_len=len(text),
        tokens=len(rows),
        phrases={k: len(v) for k, v in counts.items()},
        elapsed_ms=round(elapsed_ms, 2),
    )
    return result
