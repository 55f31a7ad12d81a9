from typing import List
from yeuai.nlu.merger import merge, merge_entities
from yeuai.nlu.schema import PhraseSpan, TaggedSequence
from yeuai.nlu.tagset import PosCategory


def extract(sequence: TaggedSequence, category: PosCategory) -> List[str]:
    return [span.text for span in merge(sequence, category)]


def match_nouns(sequence: TaggedSequence) -> List[str]:
    return extract(sequence, PosCategory.NOUN)


def match_pronouns(sequence: TaggedSequence) -> List[str]:
    return extract(sequence, PosCategory.PRONOUN)


def match_verbs(sequence: TaggedSequence) -> List[str]:
    return extract(sequence, PosCategory.VERB)


def match_adverbs(sequence: TaggedSequence) -> List[str]:
    return extract(sequence, PosCategory.ADVERB)


def match_adjectives(sequence: TaggedSequence) -> List[str]:
    return extract(sequence, PosCategory.ADJECTIVE)


def match_entity_spans(sequence: TaggedSequence) -> List[PhraseSpan]:
    """Entity spans with their type kept in `category` (e.g. "PER")."""
    return merge_entities(sequence)


def match_entities(sequence: TaggedSequence) -> List[str]:
    return [span.text for span in match_entity_spans(sequence)]
