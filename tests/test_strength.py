import math

import pytest

from passgen.analyzers.strength import (
    analyze_strength,
    classify,
    entropy,
    invalid_characters,
    tier_for_entropy,
)
from passgen.core.exceptions import AlphabetMismatchError, PassgenError
from passgen.core.models import Alphabet, AlphabetKind, Classification


class TestEntropy:
    def test_formula(self):
        assert entropy(8, 26) == pytest.approx(8 * math.log2(26))

    def test_zero_operands(self):
        assert entropy(0, 72) == 0.0
        assert entropy(12, 0) == 0.0
        assert entropy(0, 0) == 0.0

    def test_single_character_alphabet(self):
        assert entropy(100, 1) == 0.0


class TestTiers:
    @pytest.mark.parametrize(
        "bits, tier",
        [
            (0.0, Classification.WEAK),
            (27.999, Classification.WEAK),
            (28.0, Classification.MEDIUM),
            (39.999, Classification.MEDIUM),
            (40.0, Classification.STRONG),
            (59.999, Classification.STRONG),
            (60.0, Classification.VERY_STRONG),
            (512.0, Classification.VERY_STRONG),
        ],
    )
    def test_half_open_boundaries(self, bits, tier):
        assert tier_for_entropy(bits) is tier

    @pytest.mark.parametrize(
        "length, tier",
        [
            (27, Classification.WEAK),
            (28, Classification.MEDIUM),
            (39, Classification.MEDIUM),
            (40, Classification.STRONG),
            (59, Classification.STRONG),
            (60, Classification.VERY_STRONG),
        ],
    )
    def test_boundaries_through_classify(self, binary, length, tier):
        assert classify("ab" * (length // 2) + "a" * (length % 2), binary) is tier


class TestClassify:
    def test_lowercase_word_is_medium(self, lower):
        report = analyze_strength("password", lower)
        assert report.entropy == pytest.approx(37.6, abs=0.01)
        assert report.classification is Classification.MEDIUM

    def test_mixed_password_is_very_strong(self, full):
        assert classify("Password123!", full) is Classification.VERY_STRONG

    def test_empty_secret_is_weak(self, full):
        assert classify("", full) is Classification.WEAK
        assert classify("", Alphabet.custom("")) is Classification.WEAK

    def test_short_pin_is_weak(self):
        assert classify("1234", Alphabet.preset(AlphabetKind.DIGITS)) is Classification.WEAK

    def test_length_counts_code_points(self):
        report = analyze_strength("éé", Alphabet.custom("é"))
        assert report.length == 2

    def test_report_masks_secret(self, full):
        report = analyze_strength("Password123!", full)
        assert report.password_masked == "P**********!"
        assert report.alphabet is AlphabetKind.FULL
        assert report.alphabet_size == 72


class TestAlphabetMismatch:
    def test_accented_char_rejected_by_every_preset(self):
        for kind in AlphabetKind:
            if kind is AlphabetKind.CUSTOM:
                continue
            with pytest.raises(AlphabetMismatchError):
                classify("café", Alphabet.preset(kind))

    def test_error_details(self, lower):
        with pytest.raises(AlphabetMismatchError) as excinfo:
            classify("Hello World", lower)
        assert excinfo.value.invalid_chars == ["H", " ", "W"]
        assert excinfo.value.alphabet is AlphabetKind.LOWER_CASE
        assert "lower-case" in str(excinfo.value)

    def test_error_hierarchy(self, lower):
        with pytest.raises(PassgenError):
            classify("ABC", lower)
        with pytest.raises(ValueError):
            classify("ABC", lower)

    def test_empty_alphabet_rejects_non_empty_secret(self):
        with pytest.raises(AlphabetMismatchError):
            classify("a", Alphabet.custom(""))

    def test_invalid_characters_first_seen_order(self, lower):
        assert invalid_characters("aXbYaX", lower) == ["X", "Y"]
        assert invalid_characters("abc", lower) == []
