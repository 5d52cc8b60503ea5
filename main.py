import logging

import flet as ft

# Import models FIRST so the audit table is registered on Base
from models.audit_log import AuditLog

from core.api_client import ApiClient
from core.brand_service import BrandService
from core.config import API_BASE_URL, API_TIMEOUT, APP_PORT, APP_VIEW
from core.db import Base, engine
from core.exhibitor_service import ExhibitorService
from core.logger import setup_logging
from core.query_params import parse_route
from ui.admin_utils import SnackBarNotifier
from ui.admin_view import admin_view
from ui.user_view import user_view

logger = logging.getLogger(__name__)

VIEWS = {
    "/": user_view,
    "/admin": admin_view,
}


def build_services():
    """One HTTP client shared by every view of a session."""
    client = ApiClient(base_url=API_BASE_URL, timeout=API_TIMEOUT)
    return {
        "brands": BrandService(client),
        "exhibitors": ExhibitorService(client),
    }


def main(page: ft.Page):
    page.title = "Brand Management"
    page.padding = 0
    page.spacing = 0
    page.horizontal_alignment = ft.CrossAxisAlignment.STRETCH
    page.vertical_alignment = ft.MainAxisAlignment.START

    services = build_services()
    notifier = SnackBarNotifier(page)

    # Path of the view on screen and its URL sync callback
    current = {"path": None, "on_navigate": None}

    def route_change(e):
        path, params = parse_route(page.route)

        if path not in VIEWS:
            logger.info("Unknown route %s, redirecting to /", page.route)
            page.go("/")
            return

        # Same view, new query string (search submit, back/forward): just re-sync
        if path == current["path"] and current["on_navigate"]:
            current["on_navigate"](params)
            return

        logger.info("Opening view %s", path)
        current["path"] = path
        current["on_navigate"] = VIEWS[path](page, services, notifier)
        current["on_navigate"](params)

    page.on_route_change = route_change
    page.go(page.route or "/")


def run():
    setup_logging()
    Base.metadata.create_all(bind=engine)
    view = ft.AppView.WEB_BROWSER if APP_VIEW == "web" else ft.AppView.FLET_APP
    ft.app(target=main, view=view, port=APP_PORT)


if __name__ == "__main__":
    run()
