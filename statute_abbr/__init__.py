"""
法令文の略称抽出
"""
from .extraction import AbbreviationPair, extract_abbreviations

__all__ = [
    "AbbreviationPair",
    "extract_abbreviations",
]
