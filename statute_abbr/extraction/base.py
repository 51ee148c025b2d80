"""
略称抽出のデータ型
"""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class AbbreviationPair(BaseModel):
    """抽出された正式名称と略称の組"""
    model_config = ConfigDict(frozen=True)

    formal: str = Field(description="正式名称（定義される語句）")
    abbr: str = Field(description="略称")
    in_paren: bool = Field(default=False, description="括弧書きの中から見つかったか")

    def __lt__(self, other: "AbbreviationPair") -> bool:
        if not isinstance(other, AbbreviationPair):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def sort_key(self) -> Tuple[str, str, bool]:
        """並べ替えに使うキー（正式名称、略称、括弧内か）"""
        return (self.formal, self.abbr, self.in_paren)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@dataclass(frozen=True)
class ParenSpan:
    """括弧を除去した際の情報"""
    index: int       # 括弧除去後のテキストにおける括弧の出現位置（文字数）
    sub_text: str    # 括弧内のテキスト（入れ子の括弧はそのまま残る）
