"""
仮名判定ユーティリティ

文字種の判定はロケールに依存させず、Unicodeのコードポイント範囲で行う
- ひらがな: U+3041〜U+3094
- カタカナ: U+30A1〜U+30FA
"""

HIRAGANA_RANGE = ('\u3041', '\u3094')
KATAKANA_RANGE = ('\u30a1', '\u30fa')


def is_hiragana(char: str) -> bool:
    return HIRAGANA_RANGE[0] <= char <= HIRAGANA_RANGE[1]


def is_katakana(char: str) -> bool:
    return KATAKANA_RANGE[0] <= char <= KATAKANA_RANGE[1]


def is_kana(char: str) -> bool:
    """
    ひらがな又はカタカナかどうか

    Examples:
        'の' → True
        'ス' → True
        '法' → False
    """
    return is_hiragana(char) or is_katakana(char)
