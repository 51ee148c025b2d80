"""
法令文からの略称抽出

括弧書きで定義される法令用語とその略称を、法令の定型的な書き方に基づいて抽出する
- 「「〜」とは、〜をいう。」
- 「〜に規定する〜をいう。」（括弧内）
- 「以下「〜」という。」などの名付け（括弧内、正式名称は括弧の直前）
- 「〜をいう。」などの語釈（括弧内、略称は括弧の直前）

括弧の直前の語句は読点まで遡って取得する。ただし読点の直前が仮名でない場合は
漢語の並列とみなして更に遡る。「〜等」は語釈に含まれる範囲だけを取得する。
"""
import logging
import re
from typing import List, Optional, Sequence

from .base import AbbreviationPair, ParenSpan
from .paren import remove_paren
from ..utils.kana import is_kana

logger = logging.getLogger(__name__)

# 「〜」とは、〜をいう。
DEFINITION_PATTERN = re.compile(r'「(?P<abbr>[^「」]+)」とは、(?P<formal>[^。]+)をいう。')

# 〜に規定する〜をいう。
REFERENCE_PATTERN = re.compile(r'(?P<formal>[^。]+に規定する(?P<abbr>[^。、]+))をいう。')

# 以下「〜」という。
NAMING_PATTERN = re.compile(
    r'^.*(以下|において)([^「」]+)?「(?P<s>[^「」]+)」(と総称する。|という。|といい、|とする。)\Z'
)

# 〜をいう。
MEANING_PATTERN = re.compile(r'(.+。)?(?P<s>[^。]+)(をいう。|をいい、).*')

COMMA = '、'
TOU = '等'


def _scan_until_comma(reversed_chars: Sequence[str]) -> List[str]:
    """読点まで遡って取得する（漢字等に続く読点は並列とみなして読み進める）"""
    collected = []
    size = len(reversed_chars)
    for i, char in enumerate(reversed_chars):
        if char == COMMA:
            if i + 1 == size or is_kana(reversed_chars[i + 1]):
                break
        collected.append(char)
    return collected


def _scan_tou(reversed_chars: Sequence[str], meaning: str) -> List[str]:
    """「〜等」の「〜」のうち、語釈に含まれる部分だけを遡って取得する"""
    collected: List[str] = []
    for char in reversed_chars[1:]:
        candidate = ''.join(reversed(collected + [char]))
        if candidate not in meaning:
            break
        collected.append(char)
    if collected:
        collected.insert(0, TOU)
    return collected


def preceding_term(text: str, index: int, meaning: Optional[str] = None) -> str:
    """
    括弧の直前にある語句を取得

    Args:
        text: 括弧除去後の外側のテキスト
        index: 括弧の出現位置
        meaning: 括弧内の語釈（「〜をいう。」で取得した正式名称）

    Returns:
        括弧の直前の語句
    """
    reversed_chars = text[:index][::-1]

    collected: List[str] = []
    if meaning is not None and reversed_chars[:1] == TOU:
        collected = _scan_tou(reversed_chars, meaning)
    if not collected:
        collected = _scan_until_comma(reversed_chars)

    return ''.join(reversed(collected))


class AbbreviationExtractor:
    """法令文から正式名称と略称の組を抽出"""

    def __init__(self, max_depth: int = 50):
        self.max_depth = max_depth

    def extract(self, text: str) -> List[AbbreviationPair]:
        """テキストから略称を抽出"""
        stripped, spans = remove_paren(text)
        return self.analyze(stripped, spans, is_in_paren=False)

    def analyze(
        self,
        removed_paren_text: str,
        spans: Sequence[ParenSpan],
        is_in_paren: bool,
        depth: int = 0
    ) -> List[AbbreviationPair]:
        """
        括弧除去済みのテキストと括弧情報から略称を抽出

        Args:
            removed_paren_text: 括弧除去後のテキスト
            spans: remove_paren が返した括弧情報
            is_in_paren: 括弧内のテキストを処理しているか
            depth: 括弧の入れ子の深さ

        Returns:
            見つかった順の略称のリスト（重複はそのまま残す）
        """
        results = []

        match = DEFINITION_PATTERN.search(removed_paren_text)
        if match:
            results.append(AbbreviationPair(
                formal=match.group('formal'),
                abbr=match.group('abbr'),
                in_paren=is_in_paren
            ))

        for span in spans:
            sub_text, sub_spans = remove_paren(span.sub_text)

            # 括弧の中の文字列にも再帰的に適用
            if depth + 1 < self.max_depth:
                results.extend(self.analyze(sub_text, sub_spans, True, depth + 1))
            else:
                logger.warning(
                    f"Parenthesis nesting exceeds max_depth={self.max_depth}, "
                    f"not descending into span at {span.index}"
                )

            results.extend(self._analyze_span(removed_paren_text, span, sub_text))

        return results

    def _analyze_span(
        self,
        removed_paren_text: str,
        span: ParenSpan,
        sub_text: str
    ) -> List[AbbreviationPair]:
        """括弧書き一つ分の定義を抽出"""
        match = REFERENCE_PATTERN.search(sub_text)
        if match:
            return [AbbreviationPair(
                formal=match.group('formal'),
                abbr=match.group('abbr'),
                in_paren=True
            )]

        naming = NAMING_PATTERN.search(sub_text)
        meaning = MEANING_PATTERN.search(sub_text)
        if not naming and not meaning:
            return []

        term = preceding_term(
            removed_paren_text,
            span.index,
            meaning.group('s') if meaning else None
        )
        if not term:
            logger.debug(f"No preceding term for span at {span.index}")
            return []

        results = []
        if naming:
            results.append(AbbreviationPair(formal=term, abbr=naming.group('s'), in_paren=True))
        if meaning:
            results.append(AbbreviationPair(formal=meaning.group('s'), abbr=term, in_paren=True))
        return results


_default_extractor = AbbreviationExtractor()


def extract_abbreviations(text: str) -> List[AbbreviationPair]:
    """
    テキストから正式名称と略称の組を抽出

    Examples:
        「「本機構」とは、独立行政法人をいう。」
        → [AbbreviationPair(formal="独立行政法人", abbr="本機構", in_paren=False)]
    """
    return _default_extractor.extract(text)
