"""
略称抽出の設定管理
全てのパラメータを環境変数またはデフォルト値で管理
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def get_project_root() -> Path:
    """プロジェクトルートディレクトリを取得"""
    # statute_abbr/core/abbr_config.py から見て2階層上がプロジェクトルート
    return Path(__file__).parent.parent.parent


def _load_environment_variables() -> None:
    """`.env` が存在する場合は読み込む"""
    env_path = get_project_root() / ".env"

    if env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()


_load_environment_variables()


def get_default_path(relative_path: str) -> str:
    """プロジェクトルートからの相対パスを絶対パスに変換"""
    return str(get_project_root() / relative_path)


class ExtractionConfig(BaseModel):
    """抽出処理の設定"""
    # 括弧の入れ子をこの深さまで再帰的に解析する
    max_depth: int = Field(
        default=int(os.getenv("ABBR_MAX_DEPTH", "50")),
        ge=1
    )
    dedupe: bool = Field(
        default=os.getenv("ABBR_DEDUPE", "false").lower() == "true"
    )


class AbbrConfig(BaseModel):
    """略称抽出システム全体の設定"""
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)

    input_path: Optional[str] = Field(
        default=os.getenv("ABBR_INPUT_PATH", get_default_path("datasets/egov_laws"))
    )
    output_path: str = Field(
        default=os.getenv("ABBR_OUTPUT_PATH", get_default_path("data/abbreviations.jsonl"))
    )


def load_config() -> AbbrConfig:
    """設定をロード"""
    return AbbrConfig()
