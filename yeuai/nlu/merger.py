from __future__ import annotations
from typing import Any, Callable, Hashable, List, Optional

from yeuai.nlu.schema import PhraseSpan, TaggedSequence
from yeuai.nlu.tagset import PosCategory, classify_ner, classify_pos


def _runs(sequence: TaggedSequence, key: Callable[[Any], Optional[Hashable]]) -> List[PhraseSpan]:
    """
    Group maximal runs of adjacent tokens whose key is equal and not None.
    Every other token closes the open run; nothing is skipped over.
    """
    spans: List[PhraseSpan] = []
    start = 0
    current: Optional[Hashable] = None
    words: List[str] = []

    def close(end: int) -> None:
        if current is not None:
            spans.append(PhraseSpan(start=start, end=end, text=" ".join(words), category=current))

    for i, (word, tag) in enumerate(sequence):
        k = key(tag)
        if k is not None and k == current:
            words.append(word)
            continue
        close(i - 1)
        current, start, words = k, i, [word]
    close(len(sequence) - 1)
    return spans


def merge(sequence: TaggedSequence, target: PosCategory) -> List[PhraseSpan]:
    """Spans of adjacent tokens whose POS code classifies to `target`."""
    return _runs(sequence, lambda tag: target if classify_pos(tag) is target else None)


def merge_entities(sequence: TaggedSequence) -> List[PhraseSpan]:
    """
    Spans of adjacent tokens with the same entity type.
    A "no entity" token or a change of type ends the span; B-/I- markers
    play no part, so "B-PER B-PER" is one span.
    """
    return _runs(sequence, classify_ner)
