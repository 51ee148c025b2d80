#!/usr/bin/env python3
"""
法令テキストから正式名称と略称の組を抽出してJSONLに出力するスクリプト
入力はe-Gov法令XML、前処理済みJSONL（textフィールド）、プレーンテキストに対応
"""
import argparse
import json
import re
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from pydantic import ValidationError
from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from statute_abbr.core.abbr_config import AbbrConfig, ExtractionConfig, load_config
from statute_abbr.extraction import AbbreviationExtractor, AbbreviationPair
from statute_abbr.utils.text_loader import InvalidTextError, read_text

SUPPORTED_SUFFIXES = (".xml", ".jsonl", ".txt")


def element_text(element) -> str:
    """XMLエレメントのテキストを連結（括弧が分断されないよう区切りは入れない）"""
    if element is None:
        return ""
    return "".join(part.strip() for part in element.itertext())


def _record(text: str, **metadata) -> Dict[str, Any]:
    record = {"text": text}
    record.update(metadata)
    return record


def _iter_subitem_records(parent, base: Dict[str, Any], path: List[str]) -> Iterator[Dict[str, Any]]:
    """号の細分（イ、ロ、(1)…）を再帰的に取り出す"""
    for child in parent:
        if not re.fullmatch(r"Subitem\d+", child.tag):
            continue
        sub_path = path + [child.get("Num", "")]
        text = element_text(child.find(f"{child.tag}Sentence"))
        if text:
            yield _record(text, subitem="/".join(sub_path), **base)
        yield from _iter_subitem_records(child, base, sub_path)


def iter_xml_records(xml_path: Path) -> Iterator[Dict[str, Any]]:
    """法令XMLから条・項・号・号の細分ごとの本文を取り出す"""
    root = ET.fromstring(read_text(xml_path).encode("utf-8"))

    law_title = element_text(root.find(".//LawTitle")) or xml_path.stem

    for article in root.findall(".//Article"):
        article_num = article.get("Num", "")
        paragraphs = article.findall(".//Paragraph")
        base = {"source": str(xml_path), "law_title": law_title, "article": article_num}

        if not paragraphs:
            text = element_text(article)
            if text:
                yield _record(text, paragraph=None, item=None, subitem=None, **base)
            continue

        for para in paragraphs:
            para_base = dict(base, paragraph=para.get("Num") or None)

            sentence = element_text(para.find("ParagraphSentence"))
            if sentence:
                yield _record(sentence, item=None, subitem=None, **para_base)

            for item in para.findall(".//Item"):
                item_base = dict(para_base, item=item.get("Num", ""))
                item_text = element_text(item.find("ItemSentence"))
                if item_text:
                    yield _record(item_text, subitem=None, **item_base)
                yield from _iter_subitem_records(item, item_base, [])


def iter_jsonl_records(jsonl_path: Path) -> Iterator[Dict[str, Any]]:
    """前処理済みJSONLからレコードを読み込む"""
    error_count = 0
    for i, line in enumerate(read_text(jsonl_path).splitlines()):
        if not line.strip():
            continue
        try:
            doc = json.loads(line)
        except json.JSONDecodeError as e:
            error_count += 1
            if error_count <= 5:  # 最初の5件のみ表示
                print(f"Warning: Skipping invalid JSON at line {i+1}: {e}")
            continue

        text = doc.get("text", "") if isinstance(doc, dict) else ""
        if not text:
            continue
        yield _record(
            text,
            source=str(jsonl_path),
            law_title=doc.get("law_title"),
            article=doc.get("article"),
            paragraph=doc.get("paragraph"),
            item=doc.get("item")
        )

    if error_count > 5:
        print(f"... and {error_count - 5} more errors")


def iter_text_records(text_path: Path) -> Iterator[Dict[str, Any]]:
    """プレーンテキストを1行1レコードとして読み込む"""
    for line in read_text(text_path).splitlines():
        line = line.strip()
        if line:
            yield _record(line, source=str(text_path))


def iter_records(path: Path) -> Iterator[Dict[str, Any]]:
    if path.suffix == ".xml":
        return iter_xml_records(path)
    if path.suffix == ".jsonl":
        return iter_jsonl_records(path)
    return iter_text_records(path)


def collect_input_files(input_path: Path, limit: Optional[int] = None) -> List[Path]:
    """入力パスから処理対象ファイルを列挙"""
    if input_path.is_file():
        files = [input_path]
    else:
        files = sorted(
            p for p in input_path.rglob("*")
            if p.is_file() and p.suffix in SUPPORTED_SUFFIXES
        )

    if limit:
        files = files[:limit]
    return files


def dedupe_pairs(pairs: List[AbbreviationPair]) -> List[AbbreviationPair]:
    """出現順を保ったまま重複を除去"""
    return list(dict.fromkeys(pairs))


def extract_from_file(
    path: Path,
    extractor: AbbreviationExtractor,
    dedupe: bool = False
) -> List[Dict[str, Any]]:
    """1ファイル分の抽出結果をレコードのリストで返す"""
    rows = []
    for record in iter_records(path):
        pairs = extractor.extract(record["text"])
        if dedupe:
            pairs = dedupe_pairs(pairs)
        metadata = {k: v for k, v in record.items() if k != "text"}
        for pair in pairs:
            row = pair.to_dict()
            row.update(metadata)
            rows.append(row)
    return rows


def process_inputs(
    input_path: Path,
    output_file: Path,
    limit: Optional[int] = None,
    dedupe: bool = False,
    max_depth: int = 50
) -> int:
    """入力ファイルを全て処理してJSONLファイルに出力し、出力件数を返す"""
    files = collect_input_files(input_path, limit)
    print(f"Found {len(files)} files to process")

    extractor = AbbreviationExtractor(max_depth=max_depth)
    total_pairs = 0
    skipped = 0

    with output_file.open("w", encoding="utf-8") as out_f:
        for path in tqdm(files, desc="Extracting abbreviations"):
            try:
                rows = extract_from_file(path, extractor, dedupe=dedupe)
            except (InvalidTextError, ET.ParseError) as e:
                print(f"Error processing {path}: {e}")
                skipped += 1
                continue

            for row in rows:
                out_f.write(json.dumps(row, ensure_ascii=False) + "\n")
                total_pairs += 1

    print(f"Processed {len(files) - skipped} files ({skipped} skipped), extracted {total_pairs} pairs")
    print(f"Output saved to: {output_file}")
    return total_pairs


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="法令テキストから略称を抽出")
    parser.add_argument(
        "--input",
        "--input-dir",
        dest="input_path",
        type=Path,
        help="入力ファイルまたはディレクトリ（XML / JSONL / テキスト）"
    )
    parser.add_argument(
        "--output-file",
        type=Path,
        help="出力JSONLファイル"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="処理するファイル数の上限"
    )
    parser.add_argument(
        "--dedupe",
        action="store_true",
        default=None,
        help="同一レコード内の重複した組を除去"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="括弧の入れ子を解析する最大の深さ"
    )
    return parser


def resolve_extraction_config(args: argparse.Namespace, config: AbbrConfig) -> ExtractionConfig:
    """CLIオプションで指定された値を設定値より優先して抽出設定を組み立てる"""
    return ExtractionConfig(
        max_depth=config.extraction.max_depth if args.max_depth is None else args.max_depth,
        dedupe=config.extraction.dedupe if args.dedupe is None else args.dedupe
    )


def main():
    parser = build_arg_parser()
    args = parser.parse_args()

    config = load_config()

    input_path = args.input_path or Path(config.input_path)
    output_file = args.output_file or Path(config.output_path)
    try:
        extraction = resolve_extraction_config(args, config)
    except ValidationError as e:
        print(f"Error: Invalid option: {e}")
        sys.exit(1)

    if not input_path.exists():
        print(f"Error: Input not found: {input_path}")
        sys.exit(1)

    output_file.parent.mkdir(parents=True, exist_ok=True)

    process_inputs(
        input_path,
        output_file,
        args.limit,
        extraction.dedupe,
        extraction.max_depth
    )


if __name__ == "__main__":
    main()
