from __future__ import annotations
from typing import Any, List, Sequence, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

from yeuai.client.errors import MalformedResponseError
from yeuai.nlu.tagset import PosCategory

# (surface text, tag code), index aligned with the token list
TaggedSequence = List[Tuple[str, Any]]


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    pos: Any = None    # POS code as sent by the tagger
    ner: Any = None    # NER code as sent by the tagger

    @classmethod
    def from_row(cls, row: Any) -> "Token":
        """
        Row layouts from the tagger:
          [word, pos, chunk, ner, ...]  (ner service)
          [word, pos, ner]
          [word, pos]                   (tag service, no entities)
        """
        if not isinstance(row, (list, tuple)) or len(row) < 2:
            raise MalformedResponseError(f"bad token row: {row!r}"[:200])
        ner = row[3] if len(row) >= 4 else (row[2] if len(row) == 3 else None)
        return cls(text=str(row[0]), pos=row[1], ner=ner)


def pos_view(tokens: Sequence[Token]) -> TaggedSequence:
    return [(t.text, t.pos) for t in tokens]


def ner_view(tokens: Sequence[Token]) -> TaggedSequence:
    return [(t.text, t.ner) for t in tokens]


class PhraseSpan(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int     # first token index
    end: int       # last token index, inclusive
    text: str      # surface strings joined by one space
    category: Union[PosCategory, str]   # POS category or entity type


class ParseResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    nouns: List[str] = Field(default_factory=list)
    pronouns: List[str] = Field(default_factory=list)
    verbs: List[str] = Field(default_factory=list)
    adverbs: List[str] = Field(default_factory=list)
    adjectives: List[str] = Field(default_factory=list)
    entities: List[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    success: bool = True
    data: ParseResult = Field(default_factory=ParseResult)
