"""
Brands Management Tab for Admin Panel
"""
import flet as ft

from ui.brand_form import show_brand_dialog
from ui.brand_list import build_brand_list


def build_brands_tab(page: ft.Page, brand_service, exhibitor_service, notifier, audit, is_desktop: bool):
    """
    Build the Brands management tab

    Args:
        page: Flet page object
        brand_service: remote brand endpoints
        exhibitor_service: remote exhibitor endpoints (for the exhibitor select)
        notifier: snackbar notifier
        audit: callback(action) for the audit log
        is_desktop: True if desktop layout, False if mobile

    Returns:
        (ft.Tab, on_navigate)
    """

    # ===================== ADD / EDIT =====================

    def show_add_brand_dialog(e=None):
        show_brand_dialog(page, exhibitor_service, on_submit=controller.add_brand)

    def show_edit_brand_dialog(brand):
        controller.select(brand)
        show_brand_dialog(
            page,
            exhibitor_service,
            on_submit=controller.edit_brand,
            brand=brand,
            on_close=lambda: controller.select(None)
        )

    brand_list, controller, on_navigate = build_brand_list(
        page,
        brand_service,
        notifier,
        is_desktop,
        on_edit=show_edit_brand_dialog,
        audit=audit,
        allow_reorder=True
    )

    # ===================== BUILD TAB =====================

    tab = ft.Tab(
        text="Brands",
        icon=ft.Icons.STOREFRONT,
        content=ft.Column([
            ft.Container(
                content=ft.Row([
                    ft.Text("Brand Management", size=20, weight="bold", color="black"),
                    ft.ElevatedButton(
                        "Add New Brand",
                        icon=ft.Icons.ADD,
                        on_click=show_add_brand_dialog,
                        bgcolor="#2563EB",
                        color="white"
                    )
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                padding=10
            ),
            ft.Container(content=brand_list, expand=True, padding=10)
        ], expand=True, spacing=0)
    )
    return tab, on_navigate
