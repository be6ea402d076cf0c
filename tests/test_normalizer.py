from hugo_index.normalizer import (
    TextNormalizer,
    accept,
    default_stopwords,
    fold_diacritics,
    is_numeric,
    load_stopwords,
)


def test_lowercase_stop_words_and_punctuation(normalizer):
    assert normalizer.tokenize("CDI and the cloud.") == ["cdi", "cloud"]


def test_diacritics_are_folded(normalizer):
    assert normalizer.tokenize("Café") == ["cafe"]
    assert normalizer.tokenize("naïve résumé über") == ["naive", "resume", "uber"]


def test_decomposed_accents_fold_the_same(normalizer):
    assert normalizer.tokenize("café") == ["cafe"]


def test_fold_table_letters():
    assert fold_diacritics("straße") == "strasse"
    assert fold_diacritics("Øresund") == "Oresund"
    assert fold_diacritics("æther łódź") == "aether lodz"


def test_short_tokens_dropped_except_h2(normalizer):
    assert normalizer.tokenize("ab x H2 h2 abc") == ["h2", "h2", "abc"]


def test_numbers_dropped(normalizer):
    assert normalizer.tokenize("42 -3.14 3.14 2021 42nd") == ["42nd"]


def test_is_numeric():
    for token in ("123", "-4.5", "0", "3.14", "-42"):
        assert is_numeric(token), token
    for token in ("cdi", "42nd", "4.", ".5", "1e5", "1,000", "-"):
        assert not is_numeric(token), token


def test_accept():
    assert accept("cdi")
    assert accept("h2")
    assert accept("H2")
    assert accept("42nd")
    assert not accept("ab")
    assert not accept("h3")
    assert not accept("123")
    assert not accept("-4.5")


def test_segment_keeps_dotted_and_apostrophe_words(normalizer):
    assert list(normalizer.segment("don't stop e.g. at 3.14")) == [
        "don't", "stop", "e.g", "at", "3.14",
    ]


def test_segment_han_text_with_jieba(normalizer):
    assert list(normalizer.segment("我来到北京清华大学")) == ["我", "来到", "北京", "清华大学"]


def test_han_tokens_follow_length_rule(normalizer):
    assert normalizer.tokenize("hello 我来到北京清华大学") == ["hello", "清华大学"]


def test_order_of_appearance_and_determinism(normalizer):
    text = "zebra apple mango apple"
    assert normalizer.tokenize(text) == ["zebra", "apple", "mango", "apple"]
    assert normalizer.tokenize(text) == normalizer.tokenize(text)


def test_injected_stop_words_replace_default():
    custom = TextNormalizer(["Cloud"])
    assert custom.tokenize("the cloud") == ["the"]


def test_stop_words_match_after_folding():
    assert TextNormalizer(["cafe"]).tokenize("Café crème") == ["creme"]


def test_default_stopwords():
    words = default_stopwords()
    assert {"the", "and", "is"} <= words
    assert "cloud" not in words
    assert load_stopwords() is words


def test_load_stopwords_from_file(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_text("# comment\nFoo\n\n  bar  \n", encoding="utf-8")
    assert load_stopwords(path) == frozenset({"foo", "bar"})


def test_underscores_are_boundaries(normalizer):
    assert list(normalizer.segment("foo_bar")) == ["foo", "bar"]
    assert normalizer.tokenize("intro\n\n___\n\n__bold__ text") == ["intro", "bold", "text"]


def test_case_is_folded_after_compatibility_decomposition(normalizer):
    assert normalizer.tokenize("𝐇𝐞𝐥𝐥𝐨 𝐓𝐡𝐞") == ["hello"]
    assert normalizer.normalize("ℍ𝔸𝕃") == "hal"


def test_native_digit_numbers_dropped(normalizer):
    assert normalizer.tokenize("١٢٣ १२३ １２３ ٣.١٤") == []
    assert fold_diacritics("١٢٣abc") == "123abc"


def test_mixed_latin_and_han_word(normalizer):
    assert list(normalizer.segment("café北京")) == ["café", "北京"]
    assert normalizer.tokenize("résumé清华大学") == ["resume", "清华大学"]
