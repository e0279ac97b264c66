"""Tests for the entropy analyzer."""

import string

from repohygiene.scanner.entropy import (
    find_high_entropy,
    is_high_entropy,
    shannon_entropy,
)

RANDOM_32 = "aB3xY9mK2qW7rT5uI8oP4sD1fG6hJ0lZ"


class TestShannonEntropy:
    def test_empty_string(self):
        assert shannon_entropy("") == 0.0

    def test_single_char_repeated(self):
        for n in (1, 2, 10, 500):
            assert shannon_entropy("a" * n) == 0.0

    def test_two_equal_chars(self):
        assert abs(shannon_entropy("ab") - 1.0) < 0.01

    def test_known_entropy(self):
        # "abcd" has 4 symbols, each p=0.25, H = 2.0
        assert abs(shannon_entropy("abcd") - 2.0) < 0.01

    def test_permutation_invariant(self):
        assert shannon_entropy("abc") == shannon_entropy("cab")
        assert shannon_entropy("aabbbc") == shannon_entropy("bcbaba")

    def test_increases_with_diversity(self):
        # Fixed length 8, growing number of distinct symbols.
        samples = ["aaaaaaaa", "aaaabbbb", "aabbccdd", "abcdefgh"]
        values = [shannon_entropy(s) for s in samples]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_uniform_distribution(self):
        h = shannon_entropy(RANDOM_32)
        assert abs(h - 5.0) < 1e-9

    def test_english_word(self):
        assert shannon_entropy("password") < 3.5


class TestIsHighEntropy:
    def test_too_short(self):
        assert is_high_entropy("abc") is False
        assert is_high_entropy(RANDOM_32[:19], threshold=0.0) is False

    def test_too_long(self):
        long_value = (string.ascii_letters + string.digits) * 4  # 248 chars
        assert shannon_entropy(long_value) > 4.5
        assert is_high_entropy(long_value) is False

    def test_boundary_lengths_accepted(self):
        assert is_high_entropy(RANDOM_32[:20], threshold=0.0) is True
        value = ((string.ascii_letters + string.digits) * 4)[:200]
        assert is_high_entropy(value, threshold=0.0) is True

    def test_repeated_characters_rejected(self):
        assert is_high_entropy("a" * 50) is False

    def test_low_variety_rejected(self):
        # 5 distinct chars over 40 → ratio 0.125
        assert is_high_entropy("abcde" * 8, threshold=0.0) is False

    def test_random_base64_accepted(self):
        assert is_high_entropy(RANDOM_32) is True

    def test_space_rejected_even_if_random(self):
        value = RANDOM_32[:16] + " " + RANDOM_32[16:]
        assert shannon_entropy(value) > 4.5
        assert is_high_entropy(value) is False

    def test_punctuation_rejected(self):
        assert is_high_entropy("aB3$xY9!mK2@qW7#rT5%uI8^", threshold=0.0) is False

    def test_respects_custom_threshold(self):
        value = "abcdefghij1234567890"  # 20 distinct → ~4.32 bits
        assert is_high_entropy(value, 2) is True
        assert is_high_entropy(value, 5) is False


class TestFindHighEntropy:
    def test_quoted_literal(self):
        content = f'token = "{RANDOM_32}"'
        hits = find_high_entropy(content)
        assert len(hits) == 1
        assert hits[0].value == RANDOM_32
        assert hits[0].position == content.index(RANDOM_32)
        assert abs(hits[0].entropy - 5.0) < 1e-9

    def test_unquoted_assignment(self):
        content = f"API_TOKEN={RANDOM_32}\nOTHER=1\n"
        hits = find_high_entropy(content)
        assert [h.value for h in hits] == [RANDOM_32]
        assert hits[0].position == len("API_TOKEN=")

    def test_yaml_colon_assignment(self):
        content = f"credentials:\n  token: {RANDOM_32}\n"
        hits = find_high_entropy(content)
        assert len(hits) == 1
        assert content[hits[0].position:].startswith(RANDOM_32)

    def test_semicolon_terminated(self):
        hits = find_high_entropy(f"x={RANDOM_32};")
        assert len(hits) == 1

    def test_unterminated_assignment_ignored(self):
        # Followed by a character outside the charset, not whitespace/; /EOF.
        assert find_high_entropy(f"x={RANDOM_32}!") == []

    def test_position_is_absolute(self):
        content = "line one\nline two\n" + f'k = "{RANDOM_32}"\n'
        hits = find_high_entropy(content)
        assert len(hits) == 1
        assert content[hits[0].position:hits[0].position + 32] == RANDOM_32

    def test_ignores_low_entropy(self):
        assert find_high_entropy('name = "aaaaaaaaaaaaaaaaaaaaaa"') == []

    def test_short_values_ignored(self):
        assert find_high_entropy('key = "short"') == []

    def test_normal_code(self):
        assert find_high_entropy('const name = "John";') == []
