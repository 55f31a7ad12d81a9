# yeuai/nlu/tagset.py
from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class PosCategory(str, Enum):
    NOUN = "noun"
    PRONOUN = "pronoun"
    VERB = "verb"
    ADVERB = "adverb"
    ADJECTIVE = "adjective"
    OTHER = "other"


# VLSP tagset as returned by the upstream tagger.
# N* -> noun, V* -> verb, A* -> adjective, P -> pronoun, R -> adverb
POS_CATEGORIES: Mapping[str, PosCategory] = MappingProxyType({
    "N":  PosCategory.NOUN,       # common noun
    "Np": PosCategory.NOUN,       # proper noun
    "Nc": PosCategory.NOUN,       # classifier noun
    "Nu": PosCategory.NOUN,       # unit noun
    "Ny": PosCategory.NOUN,       # abbreviated noun
    "Nb": PosCategory.NOUN,       # borrowed noun
    "P":  PosCategory.PRONOUN,
    "V":  PosCategory.VERB,
    "Vb": PosCategory.VERB,       # borrowed verb
    "Vy": PosCategory.VERB,       # abbreviated verb
    "A":  PosCategory.ADJECTIVE,
    "Ab": PosCategory.ADJECTIVE,  # borrowed adjective
    "R":  PosCategory.ADVERB,
    "L":  PosCategory.OTHER,      # determiner
    "M":  PosCategory.OTHER,      # numeral
    "E":  PosCategory.OTHER,      # preposition
    "C":  PosCategory.OTHER,      # conjunction
    "Cc": PosCategory.OTHER,      # coordinating conjunction
    "I":  PosCategory.OTHER,      # interjection
    "T":  PosCategory.OTHER,      # particle
    "Y":  PosCategory.OTHER,      # abbreviation
    "Z":  PosCategory.OTHER,      # bound morpheme
    "X":  PosCategory.OTHER,      # unknown
    "CH": PosCategory.OTHER,      # punctuation
})

NO_ENTITY = "O"

# closed NER vocabulary: VLSP codes plus the long forms other taggers emit
ENTITY_TYPES: Mapping[str, str] = MappingProxyType({
    "PER": "person",
    "LOC": "location",
    "ORG": "organization",
    "MISC": "miscellaneous",
    "PERSON": "person",
    "LOCATION": "location",
    "ORGANIZATION": "organization",
    "MISCELLANEOUS": "miscellaneous",
})

_BEGIN = "B-"
_INSIDE = "I-"


def classify_pos(tag: Any) -> PosCategory:
    """Map a POS code to its category. Unknown or malformed codes are OTHER."""
    if not isinstance(tag, str):
        return PosCategory.OTHER
    return POS_CATEGORIES.get(tag.strip(), PosCategory.OTHER)


def classify_ner(tag: Any) -> Optional[str]:
    """
    Map a NER code to its entity type, or None for "no entity".
    B-/I- markers are dropped: "B-PER" and "I-PER" are both "PER".
    Codes outside ENTITY_TYPES are "no entity".
    """
    if not isinstance(tag, str):
        return None
    code = tag.strip()
    if code.startswith(_BEGIN) or code.startswith(_INSIDE):
        code = code[2:]
    return code if code in ENTITY_TYPES else None


def is_entity_begin(tag: Any) -> bool:
    return isinstance(tag, str) and tag.strip().startswith(_BEGIN) and classify_ner(tag) is not None

