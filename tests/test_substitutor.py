"""
Tests for the TextSubstitutor component.
"""

import pytest

from word_replacer_engine.core.word_replacer.backends import create_map
from word_replacer_engine.core.word_replacer.substitutor import TextSubstitutor


@pytest.fixture
def resolved_map():
    rule_map = create_map("rbt")
    rule_map.put("cat", "wolf")
    rule_map.put("dog", "wolf")
    rule_map.put("café", "coffee")
    rule_map.put("gone", "")
    return rule_map


class TestTextSubstitutor:
    """Test cases for word-by-word substitution."""

    @pytest.fixture(autouse=True)
    def _substitutor(self, resolved_map):
        self.substitutor = TextSubstitutor(resolved_map)

    def test_example_sentence(self):
        assert self.substitutor.substitute_line("The cat sat. CAT!") == "The wolf sat. CAT!"

    def test_unknown_words_keep_their_casing(self):
        assert self.substitutor.substitute_line("Cat CAT cAt") == "Cat CAT cAt"

    def test_no_partial_word_matches(self):
        assert self.substitutor.substitute_line("cats concat catalog") == "cats concat catalog"

    def test_non_letters_split_words(self):
        assert self.substitutor.substitute_line("cat9dog_cat-dog") == "wolf9wolf_wolf-wolf"

    def test_non_letters_stay_in_place(self):
        line = "  (cat),\t[dog]; 42 cat!!  "
        assert self.substitutor.substitute_line(line) == "  (wolf),\t[wolf]; 42 wolf!!  "

    def test_word_at_end_of_line_is_flushed(self):
        assert self.substitutor.substitute_line("my cat") == "my wolf"

    def test_line_without_words(self):
        assert self.substitutor.substitute_line("123 -- 456") == "123 -- 456"
        assert self.substitutor.substitute_line("") == ""

    def test_unicode_letters_form_words(self):
        assert self.substitutor.substitute_line("un café noir") == "un coffee noir"

    def test_empty_replacement_removes_word(self):
        assert self.substitutor.substitute_line("now gone, then") == "now , then"

    def test_every_line_gets_a_newline(self):
        output = self.substitutor.substitute_lines(["cat", "", "dog."])
        assert output == "wolf\n\nwolf.\n"

    def test_no_lines_gives_empty_output(self):
        assert self.substitutor.substitute_lines([]) == ""

    def test_substitute_text_normalises_terminators(self):
        output = self.substitutor.substitute_text("cat\r\ndog\rbird\n")
        assert output == "wolf\nwolf\nbird\n"

    def test_counters(self):
        self.substitutor.substitute_lines(["The cat sat.", "A dog, a CAT."])
        assert self.substitutor.lines_processed == 2
        assert self.substitutor.words_seen == 7
        assert self.substitutor.words_replaced == 2


def test_output_identical_across_backends():
    text = "The cat chased the dog; the dog fled.\nNo rule here, 3 cats.\n"
    outputs = []
    for backend in ["bst", "rbt", "hash"]:
        rule_map = create_map(backend)
        rule_map.put("cat", "lion")
        rule_map.put("dog", "hare")
        outputs.append(TextSubstitutor(rule_map).substitute_text(text))
    assert outputs[0] == outputs[1] == outputs[2]
    assert outputs[0] == "The lion chased the hare; the hare fled.\nNo rule here, 3 cats.\n"
