"""
Extraction module
"""
from .base import AbbreviationPair, ParenSpan
from .paren import remove_paren
from .patterns import AbbreviationExtractor, extract_abbreviations

__all__ = [
    "AbbreviationPair",
    "ParenSpan",
    "remove_paren",
    "AbbreviationExtractor",
    "extract_abbreviations",
]
