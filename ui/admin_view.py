"""
Admin Panel - Main Orchestrator
Builds the Brands and Exhibitors tabs
"""
import flet as ft

from core.config import AUDIT_ACTOR
from core.logger import audit_recorder
from ui.admin_constants import BREAKPOINT, BACKGROUND_COLOR
from ui.admin_brands import build_brands_tab
from ui.admin_exhibitors import build_exhibitors_tab
from ui.nav_bar import build_nav_bar


def admin_view(page: ft.Page, services: dict, notifier):
    """
    Main admin panel view

    Returns:
        on_navigate(params) - keeps the Brands tab in step with the URL
    """
    page.title = "Brand Management"
    is_desktop = (page.window.width or 0) > BREAKPOINT or page.web
    audit = audit_recorder(AUDIT_ACTOR)

    # ===================== BUILD TABS =====================

    brands_tab, on_navigate = build_brands_tab(
        page, services["brands"], services["exhibitors"], notifier, audit, is_desktop
    )

    tabs = ft.Tabs(
        selected_index=0,
        animation_duration=300,
        tabs=[
            brands_tab,
            build_exhibitors_tab(page, services["exhibitors"], notifier, audit, is_desktop)
        ],
        expand=True,
        label_color="#2563EB",
        unselected_label_color="black",
        indicator_color="#2563EB",
        divider_color="grey300"
    )

    # ===================== BUILD UI =====================

    page.clean()
    page.add(
        ft.Column([
            build_nav_bar(page),
            ft.Container(content=tabs, expand=True, bgcolor=BACKGROUND_COLOR)
        ], expand=True, spacing=0)
    )
    page.update()
    return on_navigate
