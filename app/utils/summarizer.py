import re
from typing import List

MAX_SUMMARY_WORDS = 150
MAX_SUMMARY_SENTENCES = 3
MIN_SENTENCE_LENGTH = 10

_SENTENCE_DELIMITER = re.compile(r"[.!?]+")


def split_sentences(text: str) -> List[str]:
    """Candidate sentences longer than MIN_SENTENCE_LENGTH, trimmed, in order."""
    candidates = _SENTENCE_DELIMITER.split(text or "")
    return [c.strip() for c in candidates if len(c.strip()) > MIN_SENTENCE_LENGTH]


def count_words(text: str) -> int:
    return len(text.split())


def summarize(text: str) -> str:
    """
    Extractive summary: the leading sentences of the text, stopping at the
    first one that would break the word or sentence budget.
    """
    selected = []
    word_count = 0

    for sentence in split_sentences(text):
        sentence_words = count_words(sentence)
        if word_count + sentence_words > MAX_SUMMARY_WORDS or len(selected) >= MAX_SUMMARY_SENTENCES:
            break
        selected.append(sentence)
        word_count += sentence_words

    if not selected:
        return ""
    return ". ".join(selected) + "."
