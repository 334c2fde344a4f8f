from portfolio import content
from portfolio.utils.markdown_utils import (
    FALLBACK_TEXT,
    RenderResult,
    find_article,
    read_article_body,
    render_markdown,
)


def test_find_article_matches_string_and_int_ids():
    first = content.articles.data[0]
    assert find_article("0") is first
    assert find_article(0) is first
    assert find_article("00") is None
    assert find_article("999") is None


def test_find_article_is_idempotent():
    assert find_article("1") == find_article("1")
    assert find_article("1").title == "System Design: Designing the StarWidget"


def test_find_article_over_custom_records():
    records = [content.Article(id=7, title="T", description="", date="", image="", link="/articles/7")]
    assert find_article("7", records).title == "T"
    assert find_article("0", records) is None
    assert find_article("0", []) is None


def test_heading_renders_as_h1():
    assert "<h1>Hello</h1>" in render_markdown("# Hello")


def test_table_renders_as_html_table():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html
    assert "<td>1</td>" in html


def test_fenced_code_block():
    html = render_markdown("```\nprint('hi')\n```\n")
    assert "<code>" in html
    assert "print" in html


def test_read_article_body_renders_file(tmp_path):
    (tmp_path / "0.md").write_text("# Hello\n\nSome *text*.", encoding="utf-8")
    result = read_article_body(0, str(tmp_path))
    assert not result.is_fallback
    assert "<h1>Hello</h1>" in result.html
    assert result.source.startswith("# Hello")


def test_missing_file_falls_back(tmp_path):
    result = read_article_body(3, str(tmp_path))
    assert result.is_fallback
    assert result.source == FALLBACK_TEXT
    assert FALLBACK_TEXT in result.html


def test_undecodable_file_falls_back(tmp_path):
    (tmp_path / "1.md").write_bytes(b"\xff\xfe\xfa broken")
    result = read_article_body(1, str(tmp_path))
    assert result.is_fallback


def test_result_constructors():
    ok = RenderResult.ok("<p>x</p>", "x")
    assert not ok.is_fallback
    assert RenderResult.fallback().is_fallback


def test_shipped_articles_have_bodies(app):
    for a in content.articles.data:
        result = read_article_body(a.id, app.root_path + "/articles")
        assert not result.is_fallback, a.id
