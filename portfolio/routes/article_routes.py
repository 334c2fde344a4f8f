from flask import Blueprint, abort, current_app, render_template

from portfolio import content
from portfolio.utils.markdown_utils import find_article, read_article_body

bp = Blueprint('articles', __name__, url_prefix='/articles')


def _require_articles():
    if not current_app.config["ROUTES"].get("/articles"):
        abort(404)


# Article index; empty list shows the "Coming Soon" state
@bp.route('/', strict_slashes=False)
def article_list():
    _require_articles()
    return render_template(
        'articles.html',
        section=content.articles,
        articles=list(content.articles.data),
    )


# Single article: metadata from content, body from <ARTICLES_DIR>/<id>.md
@bp.route('/<article_id>')
def article_detail(article_id):
    _require_articles()
    article = find_article(article_id)
    if article is None:
        current_app.logger.info("Article %s not found", article_id)
        abort(404)

    body = read_article_body(article.id, current_app.config["ARTICLES_DIR"])
    return render_template(
        'article.html',
        article=article,
        body=body,
        meta_title=article.title,
        meta_description=article.description,
    )
