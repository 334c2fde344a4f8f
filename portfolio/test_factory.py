from config import Config
from portfolio import create_app


def test_apps_do_not_share_route_flags():
    first = create_app("testing")
    second = create_app("testing")
    first.config["ROUTES"]["/blog"] = True
    first.config["DISPLAY"]["time"] = False

    assert second.config["ROUTES"]["/blog"] is False
    assert second.config["DISPLAY"]["time"] is True
    assert Config.ROUTES["/blog"] is False
    assert Config.DISPLAY["time"] is True
    assert first.test_client().get("/blog").status_code == 200
    assert second.test_client().get("/blog").status_code == 404
