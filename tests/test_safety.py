import pytest

from passgen.analyzers.safety import assess_safety, is_safe, lowercase_corpus
from passgen.core.models import CorpusName, SafetyVerdict
from passgen.corpora.common import CommonWords


class TestCustomCorpus:
    def test_combination_of_names_is_unsafe(self):
        assert not is_safe("marylisa", CommonWords.from_custom(["mary", "lisa"]))

    def test_unrelated_string_is_safe(self):
        assert is_safe("randomstring", CommonWords.from_custom(["password", "admin"]))

    def test_substring_alone_is_safe(self):
        assert is_safe("mypassword", CommonWords.from_custom(["password"]))

    def test_exact_match_ignores_case(self):
        corpus = CommonWords.from_custom(["Password"])
        assert assess_safety("PASSWORD", corpus) is SafetyVerdict.KNOWN_WORD

    def test_mixed_case_corpus_combination(self):
        corpus = CommonWords.from_custom(["MARY", "Lisa"])
        assert assess_safety("maryLISA", corpus) is SafetyVerdict.WORD_COMBINATION

    def test_empty_corpus(self):
        corpus = CommonWords.from_custom([])
        assert is_safe("abc", corpus)
        assert not is_safe("", corpus)

    def test_plain_iterable(self):
        assert not is_safe("adminadmin", ["admin"])
        assert is_safe("adminx", ("admin",))


class TestVerdicts:
    @pytest.mark.parametrize(
        "secret, verdict",
        [
            ("", SafetyVerdict.EMPTY),
            ("mary", SafetyVerdict.KNOWN_WORD),
            ("marylisa", SafetyVerdict.WORD_COMBINATION),
            ("mary1", SafetyVerdict.SAFE),
        ],
    )
    def test_verdict(self, secret, verdict):
        assert assess_safety(secret, CommonWords.from_custom(["mary", "lisa"])) is verdict


class TestBundledCorpora:
    def test_common_password(self):
        corpus = CommonWords.named(CorpusName.PASSWORDS)
        assert assess_safety("Password", corpus) is SafetyVerdict.KNOWN_WORD

    def test_female_names(self):
        corpus = CommonWords.named(CorpusName.FEMALE_NAMES)
        assert assess_safety("MaryLisa", corpus) is SafetyVerdict.WORD_COMBINATION

    def test_all_covers_last_names(self):
        assert not is_safe("smith", CommonWords())

    def test_random_secret_is_safe(self):
        assert is_safe("Xk9#qL2!vR", CommonWords())

    def test_lowercase_corpus_is_cached(self):
        corpus = CommonWords.named(CorpusName.ENGLISH)
        assert lowercase_corpus(corpus) is lowercase_corpus(corpus)

    def test_lowercase_corpus_custom(self):
        assert lowercase_corpus(CommonWords.from_custom(["Mary"])) == {"mary"}
