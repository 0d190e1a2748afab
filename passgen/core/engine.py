"""
Passgen Engine
===============

Central orchestrator for the passgen toolkit. :class:`PassgenEngine`
coordinates the generators and analyzers and returns unified
:class:`~shared.models.ScanResult` objects for the CLI and report layers.

Architecture follows the Facade pattern (Gamma et al., 1994), providing a
simplified interface over the individual analyzer subsystems.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from shared.config import PassgenConfig
from shared.logger import PassgenLogger
from shared.models import Finding, ScanResult, Severity

from passgen.analyzers.safety import assess_safety, lowercase_corpus
from passgen.analyzers.segmentation import split_words
from passgen.analyzers.strength import analyze_strength, entropy, tier_for_entropy
from passgen.core.exceptions import AlphabetMismatchError
from passgen.core.models import (
    Alphabet,
    Classification,
    GeneratedSecret,
    PasswordCheck,
    SafetyReport,
    SafetyVerdict,
    StrengthReport,
    mask_secret,
)
from passgen.corpora.common import CommonWords
from passgen.corpora.wordlist import WordList
from passgen.generators.passphrase import generate_passphrase
from passgen.generators.password import generate_password

TOOL_NAME = "passgen"

_NIST_REFERENCE = "NIST SP 800-63B (2017). Digital Identity Guidelines."


class PassgenEngine:
    """Orchestrates password generation and strength/safety checks.

    Usage::

        engine = PassgenEngine()
        result = engine.check_password("P@ssw0rd", Alphabet.preset(AlphabetKind.FULL))
        result = engine.generate_passwords(16, Alphabet.preset(AlphabetKind.FULL))

    Attributes:
        config: Passgen configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[PassgenConfig] = None) -> None:
        self.config = config or PassgenConfig()
        self.logger = PassgenLogger("engine")

    # ------------------------------------------------------------------ #
    #  Strength and safety check
    # ------------------------------------------------------------------ #

    def check_password(
        self,
        secret: str,
        alphabet: Alphabet,
        corpus: Optional[CommonWords] = None,
    ) -> ScanResult:
        """Classify *secret* against *alphabet* and *corpus*.

        An alphabet mismatch does not abort the check: it becomes a HIGH
        finding and the dictionary check still runs.

        Args:
            secret: The password or passphrase to check.
            alphabet: Alphabet the secret is expected to draw from.
            corpus: Dictionary to check against. Defaults to the
                configured corpus.

        Returns:
            ScanResult whose metadata is a :class:`PasswordCheck` dump.
        """
        if corpus is None:
            corpus = CommonWords.from_name(self.config.passgen.default_common_words)

        masked = mask_secret(secret)
        result = ScanResult(tool_name=TOOL_NAME, target=masked or "[empty]")
        check = PasswordCheck(password_masked=masked)

        with self.logger.operation("check_password"):
            self.logger.info(
                "Checking password against %s alphabet and %s corpus",
                alphabet.kind.value,
                corpus.name.value,
                length=len(secret),
            )

            try:
                check.strength = analyze_strength(secret, alphabet)
            except AlphabetMismatchError as exc:
                self.logger.info("Alphabet validation failed: %s", exc)
                check.strength_error = str(exc)
                check.invalid_chars = exc.invalid_chars
                result.add_finding(self._mismatch_finding(exc, alphabet))
            else:
                result.add_finding(self._strength_finding(check.strength))

            words = lowercase_corpus(corpus)
            verdict = assess_safety(secret, corpus)
            check.safety = SafetyReport(
                corpus=corpus.name,
                corpus_size=len(words),
                verdict=verdict,
            )
            result.add_finding(self._safety_finding(secret, verdict, words))

        result.metadata = check.model_dump(mode="json")
        return result.finalize(self._check_summary(check))

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate_passwords(
        self,
        length: int,
        alphabet: Alphabet,
        count: int = 1,
        with_strength: bool = False,
    ) -> list[GeneratedSecret]:
        """Generate *count* random passwords over *alphabet*."""
        with self.logger.operation("generate_passwords"):
            self.logger.debug(
                "Generating %d password(s) of length %d over %s alphabet",
                count,
                length,
                alphabet.kind.value,
            )
            secrets_out: list[GeneratedSecret] = []
            for _ in range(count):
                password = generate_password(length, alphabet)
                if with_strength:
                    report = analyze_strength(password.value, alphabet)
                    secrets_out.append(GeneratedSecret(
                        value=password.value,
                        entropy=report.entropy,
                        classification=report.classification,
                    ))
                else:
                    secrets_out.append(GeneratedSecret(value=password.value))
        return secrets_out

    def generate_passphrases(
        self,
        word_count: int,
        separator: str,
        wordlist: WordList,
        count: int = 1,
        with_strength: bool = False,
    ) -> list[GeneratedSecret]:
        """Generate *count* passphrases of *word_count* words each.

        With *with_strength*, each passphrase is rated on the words
        actually in *wordlist*: ``word_count * log2(len(words))`` bits.
        The separator adds nothing.
        """
        with self.logger.operation("generate_passphrases"):
            self.logger.debug(
                "Generating %d passphrase(s) of %d word(s) from %s",
                count,
                word_count,
                wordlist.name.value,
            )
            bits = entropy(word_count, len(wordlist.words())) if with_strength else None
            return [
                GeneratedSecret(
                    value=generate_passphrase(word_count, separator, wordlist).value,
                    entropy=bits,
                    classification=None if bits is None else tier_for_entropy(bits),
                )
                for _ in range(count)
            ]

    # ------------------------------------------------------------------ #
    #  Finding builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _strength_finding(report: StrengthReport) -> Finding:
        return Finding(
            title=f"Password Strength: {report.classification.label}",
            description=(
                f"Entropy: {report.entropy:.2f} bits "
                f"({report.length} characters over a "
                f"{report.alphabet_size}-character {report.alphabet.value} alphabet)."
            ),
            severity=_strength_severity(report.classification),
            evidence={
                "entropy_bits": round(report.entropy, 4),
                "length": report.length,
                "alphabet": report.alphabet.value,
                "alphabet_size": report.alphabet_size,
                "classification": report.classification.value,
            },
            recommendation=(
                ""
                if report.classification >= Classification.STRONG
                else "Use a longer secret or a larger alphabet."
            ),
            references=[_NIST_REFERENCE],
        )

    @staticmethod
    def _mismatch_finding(exc: AlphabetMismatchError, alphabet: Alphabet) -> Finding:
        return Finding(
            title="Alphabet Mismatch",
            description=(
                f"{len(exc.invalid_chars)} character(s) are outside the "
                f"{alphabet.kind.value} alphabet; strength was not computed."
            ),
            severity=Severity.HIGH,
            evidence={"alphabet": alphabet.kind.value, "alphabet_size": alphabet.size},
            recommendation="Re-check with an alphabet that covers every character.",
        )

    @staticmethod
    def _safety_finding(
        secret: str,
        verdict: SafetyVerdict,
        words: AbstractSet[str],
    ) -> Finding:
        if verdict is SafetyVerdict.SAFE:
            return Finding(
                title="Dictionary Check Passed",
                description="The password is not a dictionary word or a combination of them.",
                severity=Severity.INFO,
            )
        if verdict is SafetyVerdict.EMPTY:
            return Finding(
                title="Empty Password",
                description="An empty password is never safe.",
                severity=Severity.CRITICAL,
                recommendation="Choose a non-empty password.",
            )
        if verdict is SafetyVerdict.KNOWN_WORD:
            return Finding(
                title="Known Dictionary Word",
                description="The password is a common word, name, or password.",
                severity=Severity.CRITICAL,
                recommendation="Never use a single dictionary word as a password.",
                references=[_NIST_REFERENCE],
            )
        pieces = split_words(secret, words) or []
        return Finding(
            title="Dictionary Word Combination",
            description=(
                f"The password is a concatenation of {len(pieces)} dictionary "
                f"words, which a combinator attack tries early."
            ),
            severity=Severity.HIGH,
            evidence={"word_count": len(pieces)},
            recommendation="Add characters that do not come from a dictionary.",
            references=[_NIST_REFERENCE],
        )

    @staticmethod
    def _check_summary(check: PasswordCheck) -> str:
        strength = (
            check.strength.classification.label
            if check.strength is not None
            else "n/a (alphabet mismatch)"
        )
        safety = "safe" if check.safety.safe else f"unsafe ({check.safety.verdict.value})"
        return f"Strength: {strength}; dictionary check: {safety}"


def _strength_severity(tier: Classification) -> Severity:
    mapping = {
        Classification.WEAK: Severity.HIGH,
        Classification.MEDIUM: Severity.MEDIUM,
        Classification.STRONG: Severity.LOW,
        Classification.VERY_STRONG: Severity.INFO,
    }
    return mapping[tier]
