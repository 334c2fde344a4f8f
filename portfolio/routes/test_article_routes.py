import builtins

from portfolio import content
from portfolio.utils.markdown_utils import FALLBACK_TEXT


def test_article_list_shows_every_article(client):
    resp = client.get("/articles")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    for a in content.articles.data:
        assert a.title in html
        assert f'href="/articles/{a.id}"' in html
    assert "Coming Soon" not in html


def test_article_list_empty_state(client, monkeypatch):
    empty = content.Articles(label="Articles", title="Tech Articles", description="", data=())
    monkeypatch.setattr(content, "articles", empty)
    html = client.get("/articles").get_data(as_text=True)
    assert "Coming Soon" in html
    assert "No articles available at the moment." in html


def test_article_detail_renders_markdown(client, articles_dir):
    (articles_dir / "0.md").write_text("# Hello\n\n| a | b |\n|---|---|\n| 1 | 2 |\n", encoding="utf-8")
    resp = client.get("/articles/0")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "<h1>Hello</h1>" in html
    assert "<table>" in html
    assert "<title>Building Scalable React Applications</title>" in html
    assert "May 15, 2024" in html
    assert "/images/articles/img1.jpg" in html
    assert "Architecture" in html


def test_article_detail_is_stable_across_requests(client, articles_dir):
    (articles_dir / "2.md").write_text("Body", encoding="utf-8")
    first = client.get("/articles/2").get_data(as_text=True)
    second = client.get("/articles/2").get_data(as_text=True)
    assert first == second


def test_article_detail_without_file_uses_fallback(client):
    resp = client.get("/articles/1")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert FALLBACK_TEXT in html
    assert "System Design: Designing the StarWidget" in html


def test_unknown_article_is_404_without_file_access(client, monkeypatch):
    opened = []
    real_open = builtins.open

    def spy_open(*args, **kwargs):
        opened.append(args[0] if args else kwargs.get("file"))
        return real_open(*args, **kwargs)

    monkeypatch.setattr(builtins, "open", spy_open)
    resp = client.get("/articles/999")
    assert resp.status_code == 404
    assert not any(str(p).endswith(".md") for p in opened)
    assert "Page not found" in resp.get_data(as_text=True)


def test_zero_padded_id_is_not_found(client, articles_dir):
    (articles_dir / "0.md").write_text("# Hello", encoding="utf-8")
    assert client.get("/articles/00").status_code == 404


def test_articles_disabled_in_config(app, client):
    app.config["ROUTES"] = dict(app.config["ROUTES"], **{"/articles": False})
    assert client.get("/articles").status_code == 404
    assert client.get("/articles/0").status_code == 404


def test_articles_nav_item_selected_on_detail(client):
    html = client.get("/articles/0").get_data(as_text=True)
    assert 'aria-current="page"' in html
    assert html.count("is-selected") == 1


def test_article_list_accepts_trailing_slash(client):
    assert client.get("/articles").status_code == 200
    assert client.get("/articles/").status_code == 200
