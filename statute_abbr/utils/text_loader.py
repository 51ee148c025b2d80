"""
入力テキストの読み込み

抽出処理に渡す前にUTF-8として正しいかを確認する
"""
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class InvalidTextError(ValueError):
    """UTF-8として解釈できない入力"""


def ensure_text(data: Union[str, bytes], source: str = "") -> str:
    """
    入力をstrに変換

    Args:
        data: 入力データ
        source: エラーメッセージに含める入力元

    Returns:
        テキスト

    Raises:
        InvalidTextError: UTF-8として不正なバイト列の場合
    """
    if isinstance(data, str):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidTextError(f"Invalid UTF-8 input {source}: {e}") from e


def read_text(path: Path) -> str:
    """ファイルをUTF-8テキストとして読み込む"""
    text = ensure_text(Path(path).read_bytes(), source=str(path))
    logger.debug(f"Loaded {len(text)} characters from {path}")
    # BOM付きファイル対策
    return text.lstrip("\ufeff")
