"""
Exhibitors Management Tab for Admin Panel
"""
import flet as ft

from core.form_state import GENERAL_ERROR, ExhibitorFormState
from core.list_controller import ExhibitorListController
from ui.admin_constants import (
    DESKTOP_COLUMNS, EXHIBITOR_CARD_HEIGHT, PLACEHOLDER_IMAGE,
    GRID_SPACING, GRID_RUN_SPACING
)
from ui.admin_utils import close_dialog, run_in_background


def build_exhibitors_tab(page: ft.Page, exhibitor_service, notifier, audit, is_desktop: bool):
    """
    Build the Exhibitors management tab

    Args:
        page: Flet page object
        exhibitor_service: remote exhibitor endpoints
        notifier: snackbar notifier
        audit: callback(action) for the audit log
        is_desktop: True if desktop layout, False if mobile

    Returns:
        ft.Tab: Complete exhibitors tab
    """

    # ===================== CARD BUILDER =====================

    def build_exhibitor_card(exhibitor):
        return ft.Card(
            content=ft.Container(
                content=ft.Column([
                    ft.Image(
                        src=exhibitor.profile_picture or PLACEHOLDER_IMAGE,
                        height=150,
                        fit=ft.ImageFit.COVER,
                        border_radius=8,
                        error_content=ft.Image(src=PLACEHOLDER_IMAGE, height=150, fit=ft.ImageFit.COVER)
                    ),
                    ft.Text(exhibitor.name or "", weight="bold", size=16, color="black"),
                    ft.Row([
                        ft.Text("Position:", size=12, weight="bold", color="grey700", width=70),
                        ft.Text(exhibitor.position or "Not specified", size=12, color="grey700")
                    ]),
                    ft.Row([
                        ft.Text("Company:", size=12, weight="bold", color="grey700", width=70),
                        ft.Text(exhibitor.company_label or "Not specified", size=12, color="grey700")
                    ])
                ], spacing=6),
                padding=10,
                bgcolor="white",
                border_radius=12,
                **({"height": EXHIBITOR_CARD_HEIGHT} if is_desktop else {})
            )
        )

    # ===================== GRID/LIST CONTAINERS =====================

    exhibitor_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS,
        max_extent=400,
        child_aspect_ratio=1.2,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True
    )
    exhibitor_list = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)
    loading_ring = ft.Container(
        content=ft.ProgressRing(width=48, height=48),
        alignment=ft.alignment.center,
        padding=40,
        visible=False
    )

    # ===================== LOAD DATA =====================

    def render():
        target = exhibitor_grid if is_desktop else exhibitor_list
        target.controls = [build_exhibitor_card(x) for x in controller.items]
        target.visible = not controller.loading
        loading_ring.visible = controller.loading
        page.update()

    controller = ExhibitorListController(exhibitor_service, notifier=notifier, on_change=render, audit=audit)

    # ===================== ADD EXHIBITOR DIALOG =====================

    def show_add_exhibitor_dialog(e=None):
        form = ExhibitorFormState()
        labels = {
            "name": "Name *",
            "position": "Position",
            "company": "Company",
            "profile_picture": "Profile Picture URL",
        }
        fields = {
            key: ft.TextField(
                label=label,
                width=300,
                on_change=lambda ev, k=key: form.set_value(k, ev.control.value)
            )
            for key, label in labels.items()
        }
        message = ft.Text("", color="red")

        def show_errors():
            for key, field in fields.items():
                field.error_text = form.errors.get(key)
            message.value = form.errors.get(GENERAL_ERROR, "")
            page.update()

        def do_save():
            ok = form.submit(controller.add_exhibitor)
            save_btn.disabled = False
            if ok:
                close_dialog(page, dialog)
            else:
                show_errors()

        def save_exhibitor(ev):
            save_btn.disabled = True
            form.errors = {}
            show_errors()
            run_in_background(do_save)

        save_btn = ft.ElevatedButton("Add Exhibitor", on_click=save_exhibitor, bgcolor="#2563EB", color="white")

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Add New Exhibitor", size=16, weight="bold"),
            content=ft.Container(
                content=ft.Column(
                    list(fields.values()) + [message],
                    tight=True,
                    scroll=ft.ScrollMode.AUTO,
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER
                ),
                width=320,
                height=360,
                alignment=ft.alignment.top_center
            ),
            actions=[
                ft.TextButton("Cancel", on_click=lambda ev: close_dialog(page, dialog)),
                save_btn
            ]
        )
        page.overlay.append(dialog)
        dialog.open = True
        page.update()

    # ===================== BUILD TAB =====================

    tab = ft.Tab(
        text="Exhibitors",
        icon=ft.Icons.BADGE,
        content=ft.Column([
            ft.Container(
                content=ft.Row([
                    ft.Text("Exhibitor Management", size=20, weight="bold", color="black"),
                    ft.ElevatedButton(
                        "Add New Exhibitor",
                        icon=ft.Icons.PERSON_ADD,
                        on_click=show_add_exhibitor_dialog,
                        bgcolor="#2563EB",
                        color="white"
                    )
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                padding=10
            ),
            loading_ring,
            ft.Container(
                content=exhibitor_grid if is_desktop else exhibitor_list,
                expand=True,
                padding=10
            )
        ], expand=True, spacing=0)
    )

    # Initial load
    run_in_background(controller.fetch_all)

    return tab
