"""
全角括弧の除去

括弧書きを取り除いた本文と、最も外側の括弧ごとの出現位置・内容を返す
"""
from typing import List, Tuple

from .base import ParenSpan

OPEN_PAREN = '（'
CLOSE_PAREN = '）'


def remove_paren(text: str) -> Tuple[str, List[ParenSpan]]:
    """
    テキストから全角括弧書きを除去する

    Args:
        text: 入力テキスト

    Returns:
        (括弧除去後のテキスト, 括弧情報のリスト)

    Examples:
        「行政手続法（以下「法」という。）の」
        → 「行政手続法の」, [ParenSpan(index=5, sub_text="以下「法」という。")]

    対応の取れない括弧があっても例外にはしない。
    深さ0での閉じ括弧は無視し、閉じられないまま終わった括弧書きは捨てる。
    """
    depth = 0
    stripped: List[str] = []
    in_paren: List[str] = []
    spans: List[ParenSpan] = []

    for char in text:
        if char == OPEN_PAREN:
            if depth > 0:
                in_paren.append(char)
            depth += 1
        elif char == CLOSE_PAREN:
            if depth == 0:
                continue
            if depth == 1:
                spans.append(ParenSpan(index=len(stripped), sub_text=''.join(in_paren)))
                in_paren = []
            else:
                in_paren.append(char)
            depth -= 1
        elif depth == 0:
            stripped.append(char)
        else:
            in_paren.append(char)

    return ''.join(stripped), spans
