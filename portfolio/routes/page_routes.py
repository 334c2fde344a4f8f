from flask import Blueprint, Response, abort, current_app, make_response, render_template, url_for

from portfolio import content

bp = Blueprint('pages', __name__)


def _require_route(path):
    if not current_app.config["ROUTES"].get(path):
        abort(404)


@bp.route('/')
def home():
    _require_route('/')
    return render_template('home.html', home=content.home)


@bp.route('/about')
def about():
    _require_route('/about')
    return render_template('about.html', about=content.about)


@bp.route('/work')
def work():
    _require_route('/work')
    return render_template('section.html', section=content.work)


@bp.route('/blog')
def blog():
    _require_route('/blog')
    return render_template('section.html', section=content.blog)


@bp.route('/gallery')
def gallery():
    _require_route('/gallery')
    return render_template('gallery.html', gallery=content.gallery)


@bp.route('/sitemap.xml')
def sitemap():
    base = current_app.config["BASE_URL"].rstrip("/")
    try:
        locs = [base + path for path, enabled in current_app.config["ROUTES"].items() if enabled]
        if current_app.config["ROUTES"].get("/articles"):
            locs.extend(base + url_for('articles.article_detail', article_id=a.id) for a in content.articles.data)

        urls = [f"<url><loc>{loc}</loc></url>" for loc in locs]
        xml = f"""<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{''.join(urls)}
</urlset>"""

        resp = make_response(xml, 200)
        resp.headers["Content-Type"] = "application/xml; charset=utf-8"
        return resp
    except Exception as e:
        current_app.logger.error("Sitemap error: %s", e)
        return Response("Internal Server Error", status=500)


@bp.route('/robots.txt')
def robots():
    base = current_app.config["BASE_URL"].rstrip("/")
    return (
        "User-agent: *\n"
        "Allow: /\n"
        f"Sitemap: {base}/sitemap.xml\n",
        200,
        {"Content-Type": "text/plain"},
    )
