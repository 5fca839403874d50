"""Tests for seometa.services.keywords."""

from seometa.services.keywords import extract_keywords, tokenize


class TestTokenize:
    def test_lowercases_and_splits_on_non_word(self):
        assert tokenize("Organic-Cotton, SHIRT!") == ["organic", "cotton", "shirt"]

    def test_drops_short_tokens(self):
        assert tokenize("the red cap fits well") == ["fits", "well"]

    def test_keeps_digits_and_underscores(self):
        assert tokenize("model_2024 size 1200") == ["model_2024", "size", "1200"]


class TestExtractKeywords:
    def test_ranks_by_frequency(self):
        text = "cotton cotton cotton shirt shirt fabric"
        assert extract_keywords(text, 2) == ["cotton", "shirt"]

    def test_ties_keep_first_occurrence_order(self):
        text = "linen denim wool linen denim wool"
        assert extract_keywords(text) == ["linen", "denim", "wool"]

    def test_never_returns_short_tokens(self):
        result = extract_keywords("a an the big red soft shirt shirt")
        assert all(len(word) > 3 for word in result)
        assert result == ["shirt", "soft"]

    def test_respects_count(self):
        text = " ".join(f"word{i}" for i in range(30))
        assert len(extract_keywords(text, 5)) == 5
        assert len(extract_keywords(text)) == 10

    def test_zero_count(self):
        assert extract_keywords("cotton shirt", 0) == []

    def test_ignores_markup_and_scripts(self):
        html = "<p class='product'>Merino</p><script>tracking tracking tracking</script>"
        assert extract_keywords(html) == ["merino"]

    def test_case_insensitive_counting(self):
        assert extract_keywords("Cotton COTTON cotton Shirt", 1) == ["cotton"]

    def test_deterministic(self):
        text = "<p>Breathable summer shirt made from breathable organic linen.</p>"
        assert extract_keywords(text) == extract_keywords(text)

    def test_empty_input(self):
        assert extract_keywords("") == []
        assert extract_keywords(None) == []
