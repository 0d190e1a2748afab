"""
Passgen -- Password Generator and Strength Checker
===================================================

Generates random passwords and diceware passphrases, classifies password
strength by combinatorial entropy over a declared alphabet, and rejects
passwords that are dictionary words or concatenations of them.

Usage::

    from passgen.analyzers import classify, is_safe
    from passgen.core.models import Alphabet, AlphabetKind
    from passgen.corpora import CommonWords

    classify("password", Alphabet.preset(AlphabetKind.LOWER_CASE))   # MEDIUM
    is_safe("marylisa", CommonWords.from_custom(["mary", "lisa"]))   # False
"""

__version__ = "0.3.0"
