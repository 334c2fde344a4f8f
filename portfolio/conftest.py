import pytest

from portfolio import create_app


@pytest.fixture
def articles_dir(tmp_path):
    d = tmp_path / "articles"
    d.mkdir()
    return d


@pytest.fixture
def app(articles_dir):
    app = create_app("testing")
    app.config["ARTICLES_DIR"] = str(articles_dir)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
