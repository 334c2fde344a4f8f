# config.py

import os
import subprocess
from datetime import datetime
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _compute_asset_version() -> str:
    explicit = os.getenv("ASSET_VERSION")
    if explicit:
        return explicit
    try:
        sha = (
            subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], cwd=BASE_DIR, stderr=subprocess.DEVNULL)
            .decode()
            .strip()
        )
        if sha:
            return sha
    except Exception:
        pass
    return datetime.utcnow().strftime("%Y%m%d%H%M%S")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "super-secret-dev-key")
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    BASE_URL = os.getenv("BASE_URL", "https://guanggengyang.com")
    ARTICLES_DIR = os.getenv(
        "ARTICLES_DIR",
        str(BASE_DIR / "portfolio" / "articles"),
    )
    EXPORT_DIR = os.getenv("EXPORT_DIR", str(BASE_DIR / "build"))
    ASSET_VERSION = _compute_asset_version()

    # Pages reachable from the header; a disabled page answers 404
    ROUTES = {
        "/": True,
        "/about": True,
        "/work": False,
        "/blog": False,
        "/gallery": True,
        "/articles": True,
    }

    DISPLAY = {
        "location": True,
        "time": True,
    }

    CLOCK_INTERVAL = 1.0
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    @staticmethod
    def init_app(app):
        pass


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    TESTING = True
    ASSET_VERSION = "test"


config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig
}
