from readability_index.config import ReadabilityConfig
from readability_index.models import TextCounts
from readability_index.textstats import (
    SENTENCE_SPLIT_RE,
    analyze,
    count_characters,
    count_sentences,
    count_syllables,
    count_word_syllables,
    count_words,
    split_segments,
)


def test_analyze_simple_sentence():
    counts = analyze("The cat sat on a mat.")

    assert counts == TextCounts(
        characters=16, words=6, sentences=1, syllables=5, polysyllables=0
    )


def test_characters_ignore_spaces_tabs_and_newlines():
    assert count_characters("a b\tc\nd") == 4
    assert count_characters("") == 0
    # Carriage returns are not layout whitespace for this rule.
    assert count_characters("a\r\nb") == 3


def test_single_token_is_one_word():
    assert count_words("supercalifragilistic.") == 1
    assert count_words("") == 1


def test_every_whitespace_character_splits_words():
    assert count_words("one  two") == 3
    assert count_words(" leading") == 2
    assert count_words("a\tb\nc") == 3


def test_trailing_whitespace_word_segments_are_configurable():
    assert count_words("one two ") == 3
    assert count_words("one two ", keep_trailing_empty=False) == 2
    assert analyze("one two\n\n").words == 4
    config = ReadabilityConfig(keep_trailing_empty_words=False)
    assert analyze("one two\n\n", config).words == 2


def test_sentence_split_drops_trailing_empty_segments():
    assert split_segments(SENTENCE_SPLIT_RE, "Hi. Bye!") == ["Hi", " Bye"]
    assert count_sentences("Hi. Bye!") == 2
    assert count_sentences("Wait...") == 1


def test_sentence_split_keeps_internal_empty_segments():
    assert count_sentences("Really?! Yes.") == 3
    assert count_sentences("One... two") == 4


def test_sentence_count_edge_cases():
    assert count_sentences("no terminator here") == 1
    assert count_sentences("") == 1
    assert count_sentences("...") == 0


def test_vowel_runs_count_syllables():
    assert count_word_syllables("beautiful") == 3
    assert count_word_syllables("BEAUTIFUL") == 3
    assert count_word_syllables("rhythm") == 1
    assert count_word_syllables("tsk") == 0


def test_polysyllable_counts_the_word_once():
    assert count_syllables("beautiful") == (3, 1)
    assert count_syllables("anniversaries") == (5, 1)
    assert count_syllables("cat dog") == (2, 0)


def test_silent_e_is_removed_before_counting():
    # "make" -> "mak", "rate." -> "rat"
    assert count_syllables("make") == (1, 0)
    assert count_syllables("celebrate.") == (3, 1)
    assert count_syllables("ride!") == (1, 0)


def test_analyze_polysyllabic_text():
    counts = analyze("Beautiful elephants celebrate anniversaries.")

    assert counts == TextCounts(
        characters=41, words=4, sentences=1, syllables=14, polysyllables=4
    )


def test_analyze_is_idempotent():
    text = "Go to the big red bus. It is fun to ride!"
    assert analyze(text) == analyze(text)
    assert analyze(text) == TextCounts(
        characters=31, words=11, sentences=2, syllables=10, polysyllables=0
    )


def test_polysyllables_never_exceed_words():
    counts = analyze("Extraordinary communication requires collaboration.")
    assert counts.polysyllables <= counts.words
    assert counts.polysyllables == 4


def test_words_split_only_on_ascii_whitespace():
    assert count_words("Hello\u00a0world.") == 1
    assert count_words("a\x85b") == 1
    assert count_words("a\u3000b") == 1
    assert count_words("a\x0bb\x0cc\rd") == 4


def test_non_breaking_space_does_not_split_syllable_words():
    # Non-breaking spaces keep the three short words together as one word.
    assert count_syllables("cat\u00a0dog\u00a0bus") == (3, 1)


def test_characters_count_utf16_code_units():
    assert count_characters("caf\u00e9") == 4
    assert count_characters("\U0001F600 ok") == 4
