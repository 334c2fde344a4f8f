from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from portfolio import content


@dataclass(frozen=True)
class NavItem:
    path: str
    label: str
    icon: str
    exact: bool = False
    selected: bool = False


def _nav_entries() -> List[NavItem]:
    # Home shows an icon only; the other entries carry their section label
    return [
        NavItem(path="/", label="", icon="home", exact=True),
        NavItem(path="/about", label=content.about.label, icon="person", exact=True),
        NavItem(path="/work", label=content.work.label, icon="grid"),
        NavItem(path="/blog", label=content.blog.label, icon="book"),
        NavItem(path="/gallery", label=content.gallery.label, icon="gallery"),
        NavItem(path="/articles", label=content.articles.label, icon="document"),
    ]


def is_selected(item: NavItem, current_path: Optional[str]) -> bool:
    """
    Exact routes match only themselves; section routes also match anything
    nested under them, so /articles/2 highlights Articles.
    """
    path = current_path or ""
    if item.exact:
        return path == item.path
    return path == item.path or path.startswith(item.path.rstrip("/") + "/")


def build_nav(current_path: Optional[str], routes: Dict[str, bool]) -> List[NavItem]:
    return [
        NavItem(
            path=item.path,
            label=item.label,
            icon=item.icon,
            exact=item.exact,
            selected=is_selected(item, current_path),
        )
        for item in _nav_entries()
        if routes.get(item.path)
    ]
