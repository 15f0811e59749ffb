import pytest

from nodeish import regex
from nodeish.regex import Regex, RegexError


def test_literal_search_span_covers_literal():
    text = "xxabcxx"
    span = Regex("abc").search(text)
    assert text[span[0] : span[1]] == "abc"


def test_literal_match_and_miss():
    assert Regex("abc").match("xxabcxx") == "abc"
    assert Regex("abc").match("xyz") is None
    assert Regex("abc").test("xyz") is False


def test_literal_at_end_of_text():
    assert Regex("abc").match("xxabc") == "abc"


def test_search_on_empty_text_is_none():
    assert Regex("a").search("") is None


def test_search_all_finds_every_occurrence():
    text = "ab-ab-ab"
    spans = Regex("ab").search_all(text)
    assert len(spans) == text.count("ab")
    assert all(text[a:b] == "ab" for a, b in spans)
    assert [a for a, _ in spans] == sorted(a for a, _ in spans)


def test_match_all_returns_matched_texts():
    text = "ab-ab-ab"
    assert Regex("ab").match_all(text) == ["ab"] * text.count("ab")


def test_replace_all_and_replace_first():
    text = "ab-ab-ab"
    assert Regex("ab").replace_all(text, "X") == text.replace("ab", "X")
    assert Regex("ab").replace(text, "X") == text.replace("ab", "X", 1)


def test_remove_all_and_remove_first():
    text = "ab-ab-ab"
    assert Regex("ab").remove_all(text) == text.replace("ab", "")
    assert Regex("ab").remove(text) == text.replace("ab", "", 1)


def test_replace_without_match_keeps_text():
    assert Regex("zz").replace("abc", "X") == "abc"


def test_split_on_pattern():
    text = "a--b--c"
    assert Regex("--").split(text) == text.split("--")


def test_split_without_match_is_empty():
    assert Regex("zz").split("abc") == []


def test_character_class_range():
    assert Regex("[0-9]+").match("abc123def") == "123"


def test_negated_character_class():
    assert Regex("[^a]+").match("aaxyaa") == "xy"


def test_digit_escape_to_end_of_text():
    assert Regex("\\d+").match("ab42") == "42"


def test_word_escape():
    assert Regex("\\w+").match("  hello  ") == "hello"


def test_dot_matches_any_character():
    assert Regex("a.c").test("abc") is True
    assert Regex("a.c").test("abd") is False


def test_exact_repeat():
    assert Regex("a{2}").match("baaab") == "aa"


def test_alternation():
    assert Regex("cat|dog").match("hotdog") == "dog"
    assert Regex("cat|dog").match("concat") == "cat"


def test_start_anchor():
    assert Regex("^ab").test("abab") is True
    assert Regex("^b").test("ab") is False


def test_optional_alone_never_reports_empty_match():
    assert Regex("x?").search("abc") is None


def test_icase_folds_text():
    assert Regex("abc", icase=True).test("xABCx") is True
    assert Regex("abc").test("ABC") is False


def test_group_matches_are_remembered():
    compiled = Regex("(ab)+")
    assert compiled.match("xxababyy") == "abab"
    assert compiled.memory() == ["ab", "ab"]


def test_memory_is_a_copy():
    compiled = Regex("(ab)")
    compiled.match("ab")
    compiled.memory().append("other")
    assert compiled.memory() == ["ab"]


@pytest.mark.parametrize("pattern", [")", "]", "{2}", "(ab", "[ab"])
def test_malformed_patterns_raise(pattern):
    with pytest.raises(RegexError):
        Regex(pattern).search("abc")


def test_module_functions_accept_strings_and_compiled():
    text = "one ab two ab"
    assert regex.replace_all(text, "ab", "X") == text.replace("ab", "X")
    assert regex.replace_all(text, Regex("ab"), "X") == text.replace("ab", "X")
    assert regex.remove_all(text, "ab") == text.replace("ab", "")
    assert regex.replace(text, "ab", "X") == text.replace("ab", "X", 1)
    assert regex.remove(text, "ab") == text.replace("ab", "", 1)
    assert regex.match_all(text, "ab") == ["ab", "ab"]
    assert regex.match(text, Regex("two")) == "two"
    assert regex.search_all(text, "ab") == Regex("ab").search_all(text)
    assert regex.search(text, "ab") == Regex("ab").search(text)


def test_module_test_with_icase():
    assert regex.test("HELLO", "hello", True) is True
    assert regex.test("HELLO", "hello") is False


def test_split_on_single_character():
    text = "a,b,,c"
    assert regex.split(text, ",") == text.split(",")


def test_split_into_chunks():
    text = "abcdefg"
    pieces = regex.split(text, 3)
    assert "".join(pieces) == text
    assert all(len(piece) <= 3 for piece in pieces)
    assert regex.split(text, "") == list(text)


def test_split_with_compiled_pattern():
    text = "x--y"
    assert regex.split(text, Regex("--")) == text.split("--")


def test_join():
    assert regex.join("-", 1, "a", 2.5) == "-".join(["1", "a", "2.5"])


def test_format_substitutes_placeholders():
    assert regex.format("${0} and ${1}", "cats", "dogs") == "cats and dogs"


def test_format_without_placeholders_is_unchanged():
    assert regex.format("plain text", "unused") == "plain text"