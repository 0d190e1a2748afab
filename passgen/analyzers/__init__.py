"""
Passgen Analyzers
==================

Strength classification, word segmentation, and dictionary safety.
"""

from passgen.analyzers.safety import assess_safety, is_safe
from passgen.analyzers.segmentation import is_word_combination, split_words
from passgen.analyzers.strength import (
    analyze_strength,
    classify,
    entropy,
    tier_for_entropy,
)

__all__ = [
    "analyze_strength",
    "assess_safety",
    "classify",
    "entropy",
    "is_safe",
    "is_word_combination",
    "split_words",
    "tier_for_entropy",
]
