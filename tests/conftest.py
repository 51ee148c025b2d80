"""
pytest設定とフィクスチャ
"""
import sys
from pathlib import Path
import json

import pytest

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def project_root_path():
    """プロジェクトルートのパス"""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_xml_content():
    """サンプルXMLコンテンツ"""
    return """<?xml version="1.0" encoding="UTF-8"?>
<Law Era="Showa" Lang="ja" LawType="Act" Num="285" Year="26">
    <LawNum>昭和二十六年法律第二百八十五号</LawNum>
    <LawBody>
        <LawTitle Kana="はくぶつかんほう">博物館法</LawTitle>
        <MainProvision>
            <Chapter Num="1">
                <ChapterTitle>第一章　総則</ChapterTitle>
                <Article Num="1">
                    <ArticleCaption>（目的）</ArticleCaption>
                    <ArticleTitle>第一条</ArticleTitle>
                    <Paragraph Num="1">
                        <ParagraphNum/>
                        <ParagraphSentence>
                            <Sentence>この法律は、博物館の設置及び運営に関して必要な事項を定める。</Sentence>
                        </ParagraphSentence>
                    </Paragraph>
                </Article>
                <Article Num="2">
                    <ArticleCaption>（定義）</ArticleCaption>
                    <ArticleTitle>第二条</ArticleTitle>
                    <Paragraph Num="1">
                        <ParagraphNum/>
                        <ParagraphSentence>
                            <Sentence>この法律において「博物館」とは、資料を収集し、保管し、展示する機関をいう。</Sentence>
                        </ParagraphSentence>
                    </Paragraph>
                    <Paragraph Num="2">
                        <ParagraphNum>２</ParagraphNum>
                        <ParagraphSentence>
                            <Sentence>前項に規定する博物館のうち、地方公共団体の設置するもの（以下「公立博物館」という。）は、教育委員会の所管に属する。</Sentence>
                        </ParagraphSentence>
                    </Paragraph>
                </Article>
                <Article Num="3">
                    <ArticleCaption>（設置者）</ArticleCaption>
                    <ArticleTitle>第三条</ArticleTitle>
                    <Paragraph Num="1">
                        <ParagraphNum/>
                        <ParagraphSentence>
                            <Sentence>博物館は、次に掲げる者が設置する。</Sentence>
                        </ParagraphSentence>
                        <Item Num="1">
                            <ItemTitle>一</ItemTitle>
                            <ItemSentence>
                                <Sentence>国（国の行政機関をいう。）</Sentence>
                            </ItemSentence>
                        </Item>
                        <Item Num="2">
                            <ItemTitle>二</ItemTitle>
                            <ItemSentence>
                                <Sentence>地方公共団体</Sentence>
                            </ItemSentence>
                        </Item>
                    </Paragraph>
                </Article>
            </Chapter>
        </MainProvision>
    </LawBody>
</Law>"""


@pytest.fixture
def sample_xml_file(tmp_path, sample_xml_content):
    """サンプルXMLファイル"""
    xml_dir = tmp_path / "test_law_123"
    xml_dir.mkdir()
    xml_file = xml_dir / "test_law_123.xml"
    xml_file.write_text(sample_xml_content, encoding="utf-8")
    return xml_file


@pytest.fixture
def sample_jsonl_data():
    """サンプルJSONLデータ"""
    return [
        {
            "law_title": "博物館法",
            "law_num": "昭和二十六年法律第二百八十五号",
            "article": "1",
            "article_caption": "（目的）",
            "article_title": "第一条",
            "paragraph": "1",
            "item": None,
            "text": "この法律は、博物館の設置及び運営に関して必要な事項を定める。"
        },
        {
            "law_title": "博物館法",
            "law_num": "昭和二十六年法律第二百八十五号",
            "article": "2",
            "article_caption": "（定義）",
            "article_title": "第二条",
            "paragraph": "1",
            "item": None,
            "text": "この法律において「博物館」とは、資料を収集し、保管し、展示する機関をいう。"
        },
        {
            "law_title": "行政手続法",
            "law_num": "平成五年法律第八十八号",
            "article": "2",
            "article_caption": "（定義）",
            "article_title": "第二条",
            "paragraph": "1",
            "item": "3",
            "text": "許認可等（行政手続法（以下「法」という。）に規定する許認可等をいう。）の申請"
        }
    ]


@pytest.fixture
def sample_jsonl_file(tmp_path, sample_jsonl_data):
    """サンプルJSONLファイル（不正な行を1行含む）"""
    jsonl_file = tmp_path / "test_data.jsonl"
    with open(jsonl_file, "w", encoding="utf-8") as f:
        for item in sample_jsonl_data:
            f.write(json.dumps(item, ensure_ascii=False) + "\n")
        f.write("{not json\n")
    return jsonl_file


@pytest.fixture
def sample_text_file(tmp_path):
    """サンプルテキストファイル"""
    text_file = tmp_path / "statute.txt"
    text_file.write_text(
        "「本機構」とは、独立行政法人をいう。\n"
        "\n"
        "行政手続法（以下「法」という。）\n",
        encoding="utf-8"
    )
    return text_file


@pytest.fixture
def sample_subitem_xml_file(tmp_path):
    """号の細分に定義を含むサンプルXMLファイル"""
    content = """<?xml version="1.0" encoding="UTF-8"?>
<Law Era="Heisei" Lang="ja" LawType="Act" Num="88" Year="5">
    <LawNum>平成五年法律第八十八号</LawNum>
    <LawBody>
        <LawTitle>行政手続法施行令</LawTitle>
        <MainProvision>
            <Article Num="1">
                <ArticleTitle>第一条</ArticleTitle>
                <Paragraph Num="1">
                    <ParagraphNum/>
                    <ParagraphSentence>
                        <Sentence>次に掲げる法律の規定を適用する。</Sentence>
                    </ParagraphSentence>
                    <Item Num="1">
                        <ItemTitle>一</ItemTitle>
                        <ItemSentence>
                            <Sentence>次に掲げる法律</Sentence>
                        </ItemSentence>
                        <Subitem1 Num="1">
                            <Subitem1Title>イ</Subitem1Title>
                            <Subitem1Sentence>
                                <Sentence>行政手続法（以下「法」という。）</Sentence>
                            </Subitem1Sentence>
                            <Subitem2 Num="1">
                                <Subitem2Title>（１）</Subitem2Title>
                                <Subitem2Sentence>
                                    <Sentence>国（国の行政機関をいう。）</Sentence>
                                </Subitem2Sentence>
                            </Subitem2>
                        </Subitem1>
                    </Item>
                </Paragraph>
            </Article>
        </MainProvision>
    </LawBody>
</Law>"""
    xml_file = tmp_path / "subitem_law.xml"
    xml_file.write_text(content, encoding="utf-8")
    return xml_file
