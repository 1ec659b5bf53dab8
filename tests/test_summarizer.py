from app.utils.summarizer import (
    MAX_SUMMARY_SENTENCES,
    MAX_SUMMARY_WORDS,
    count_words,
    split_sentences,
    summarize,
)


def test_discards_short_candidates_and_keeps_first_three():
    text = (
        "Short. This is a sufficiently long sentence one. "
        "This is a sufficiently long sentence two. "
        "This is a sufficiently long sentence three and more."
    )

    assert summarize(text) == (
        "This is a sufficiently long sentence one. "
        "This is a sufficiently long sentence two. "
        "This is a sufficiently long sentence three and more."
    )


def test_repeated_delimiters_count_as_one():
    text = "What is going on here?!? Nothing much happening today... Really nothing at all!!!"

    assert split_sentences(text) == [
        "What is going on here",
        "Nothing much happening today",
        "Really nothing at all",
    ]


def test_candidate_of_exactly_ten_characters_is_dropped():
    assert split_sentences("abcdefghij. abcdefghijk.") == ["abcdefghijk"]


def test_no_qualifying_sentence_gives_empty_summary():
    assert summarize("Hi. Yes. No!") == ""
    assert summarize("") == ""


def test_stops_at_first_sentence_over_budget():
    long_sentence = " ".join(["word"] * 145)
    text = f"{long_sentence}. This one has far too many words to fit now. Tiny fits here."

    # The third candidate would fit, but selection stops at the second
    assert summarize(text) == long_sentence + "."


def test_first_sentence_over_budget_gives_empty_summary():
    text = " ".join(["word"] * (MAX_SUMMARY_WORDS + 1)) + ". A short follow up sentence."

    assert summarize(text) == ""


def test_never_exceeds_sentence_or_word_budget():
    sentences = [" ".join(["lorem"] * n) for n in (20, 30, 40, 45, 50, 10)]
    summary = summarize(". ".join(sentences) + ".")

    assert summary.count(".") <= MAX_SUMMARY_SENTENCES
    assert count_words(summary) <= MAX_SUMMARY_WORDS


def test_abbreviations_are_split_like_any_period():
    text = "Yesterday Mr. Smith went to the market for apples."

    assert split_sentences(text) == ["Yesterday Mr", "Smith went to the market for apples"]


def test_sentences_totalling_exactly_the_word_budget_are_kept():
    first = " ".join(["alpha"] * 100)
    second = " ".join(["beta"] * 50)

    assert summarize(f"{first}. {second}.") == f"{first}. {second}."
