"""
Public view - featured brands with search and sort
"""
import flet as ft

from ui.admin_constants import BREAKPOINT, BACKGROUND_COLOR
from ui.brand_list import build_brand_list
from ui.nav_bar import build_nav_bar


def user_view(page: ft.Page, services: dict, notifier):
    """Read-only brand list. Returns on_navigate(params)."""
    page.title = "Featured Brands"
    is_desktop = (page.window.width or 0) > BREAKPOINT or page.web

    brand_list, _, on_navigate = build_brand_list(page, services["brands"], notifier, is_desktop)

    page.clean()
    page.add(
        ft.Column([
            build_nav_bar(page),
            ft.Container(
                content=ft.Column([
                    ft.Text("Featured Brands", size=28, weight="bold", color="black", text_align=ft.TextAlign.CENTER),
                    brand_list
                ], expand=True, spacing=15, horizontal_alignment=ft.CrossAxisAlignment.CENTER),
                expand=True,
                padding=20,
                bgcolor=BACKGROUND_COLOR
            )
        ], expand=True, spacing=0)
    )
    page.update()
    return on_navigate
