import os
from datetime import datetime

import click
from flask import Flask, render_template, request
from flask_cors import CORS

from config import config


def create_app(config_name=None):
    config_name = config_name or os.getenv("FLASK_CONFIG", "default")
    app = Flask(
        __name__,
        template_folder="templates",
        static_folder="static",
        static_url_path="",  # /images/..., /css/... like the site's public/ folder
    )

    # ---- Configs ----
    app.config.from_object(config[config_name])
    # per-app copies of the class-level dicts
    app.config["ROUTES"] = dict(app.config["ROUTES"])
    app.config["DISPLAY"] = dict(app.config["DISPLAY"])
    config[config_name].init_app(app)

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    from portfolio import content
    from portfolio.utils.clock import format_time
    from portfolio.utils.navigation import build_nav

    @app.url_defaults
    def add_asset_version(endpoint, values):
        if endpoint == "static" and values is not None and "v" not in values:
            values["v"] = app.config["ASSET_VERSION"]

    @app.context_processor
    def inject_site():
        return {
            "person": content.person,
            "social": content.social,
            "newsletter": content.newsletter,
            "nav_items": build_nav(request.path, app.config["ROUTES"]),
            "display": app.config["DISPLAY"],
            "current_time": format_time(content.person.location),
            "year": datetime.now().year,
        }

    # ---- Blueprints ----
    from portfolio.routes import article_routes, clock_routes, page_routes
    app.register_blueprint(page_routes.bp)
    app.register_blueprint(article_routes.bp)
    app.register_blueprint(clock_routes.bp)

    @app.errorhandler(404)
    def not_found(e):
        return render_template("404.html"), 404

    @app.cli.command("export-site")
    @click.argument("output_dir", required=False)
    def export_site_command(output_dir):
        """Render the whole site to static files."""
        from portfolio.utils.export import export_site

        target = output_dir or app.config["EXPORT_DIR"]
        written = export_site(app, target)
        click.echo(f"Exported {len(written)} entries to {target}")

    return app
