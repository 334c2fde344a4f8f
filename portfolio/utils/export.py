"""
Static export of the site.

Every enabled page, every article detail page, the sitemap and robots.txt
are rendered through the test client and written as plain files, followed
by the contents of the static folder, so the output can be served by any static host.
"""

from __future__ import annotations

import os
import shutil
from typing import List

from portfolio import content


class ExportError(RuntimeError):
    pass


def site_paths(app) -> List[str]:
    routes = app.config.get("ROUTES", {})
    paths = [path for path, enabled in routes.items() if enabled]
    if routes.get("/articles"):
        paths.extend(f"/articles/{a.id}" for a in content.articles.data)
    paths.extend(["/sitemap.xml", "/robots.txt"])
    return paths


def output_file(output_dir: str, path: str) -> str:
    rel = path.strip("/")
    if not rel:
        return os.path.join(output_dir, "index.html")
    if os.path.splitext(rel)[1]:
        return os.path.join(output_dir, rel)
    return os.path.join(output_dir, rel, "index.html")


def export_site(app, output_dir: str) -> List[str]:
    written = []
    client = app.test_client()
    for path in site_paths(app):
        resp = client.get(path)
        if resp.status_code != 200:
            raise ExportError(f"{path} answered {resp.status_code}")
        target = output_file(output_dir, path)
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, "wb") as f:
            f.write(resp.get_data())
        app.logger.info("Exported %s -> %s", path, target)
        written.append(target)

    if app.static_folder and os.path.isdir(app.static_folder):
        # static files are served from the site root
        shutil.copytree(app.static_folder, output_dir, dirs_exist_ok=True)
        written.append(output_dir)
    return written
