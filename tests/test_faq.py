"""Tests for seometa.services.faq."""

from seometa.services.faq import MAX_FAQS, QUESTION_STARTERS, generate_faqs, split_sentences
from seometa.services.normalizer import normalize

_DESCRIPTION = (
    "<p>This shirt is made from organic cotton grown in Portugal. "
    "Machine wash it cold with similar colours! "
    "Short one. "
    "Does it shrink after the first few washes? "
    "The relaxed fit works well for everyday wear.</p>"
)


class TestSplitSentences:
    def test_filters_short_sentences(self):
        sentences = split_sentences("Short one. This sentence is long enough to keep.")
        assert sentences == ["This sentence is long enough to keep"]

    def test_splits_on_repeated_terminators(self):
        sentences = split_sentences(
            "Wow this jacket is really warm!!! Is it waterproof as well??"
        )
        assert sentences == ["Wow this jacket is really warm", "Is it waterproof as well"]

    def test_exactly_twenty_characters_rejected(self):
        assert split_sentences("a" * 20 + ".") == []
        assert split_sentences("a" * 21 + ".") == ["a" * 21]


class TestGenerateFaqs:
    def test_builds_question_from_first_five_words(self):
        faqs = generate_faqs(_DESCRIPTION)
        assert faqs[0].question == "What this shirt is made from?"
        assert faqs[0].answer == "This shirt is made from organic cotton grown in Portugal"

    def test_starters_follow_position(self):
        faqs = generate_faqs(_DESCRIPTION)
        assert [faq.question.split()[0] for faq in faqs] == ["What", "How", "Why", "When"]

    def test_answer_keeps_original_case(self):
        faqs = generate_faqs("Made In PORTUGAL from certified ORGANIC cotton.")
        assert faqs[0].answer == "Made In PORTUGAL from certified ORGANIC cotton"
        assert faqs[0].question == "What made in portugal from certified?"

    def test_short_sentence_topic(self):
        faqs = generate_faqs("Waterproofing_treatment included.")
        assert faqs[0].question == "What waterproofing_treatment included?"

    def test_caps_at_five(self):
        text = " ".join(f"Sentence number {i} is comfortably long enough." for i in range(10))
        faqs = generate_faqs(text)
        assert len(faqs) == MAX_FAQS
        assert faqs[-1].answer == "Sentence number 4 is comfortably long enough"

    def test_starters_cycle(self):
        assert QUESTION_STARTERS == ("What", "How", "Why", "When", "Where", "Can", "Is")
        text = " ".join(f"Sentence number {i} is comfortably long enough." for i in range(5))
        starters = [faq.question.split()[0] for faq in generate_faqs(text)]
        assert starters == ["What", "How", "Why", "When", "Where"]

    def test_answers_are_substrings_of_normalized_input(self):
        normalized = normalize(_DESCRIPTION)
        for faq in generate_faqs(_DESCRIPTION):
            assert faq.answer in normalized

    def test_questions_end_with_question_mark(self):
        assert all(faq.question.endswith("?") for faq in generate_faqs(_DESCRIPTION))

    def test_no_qualifying_sentences(self):
        assert generate_faqs("<p>Tiny. Also tiny!</p>") == []

    def test_empty_input(self):
        assert generate_faqs("") == []
        assert generate_faqs(None) == []
