"""
Brand list section: search bar, sort bar and the brand grid.

Shared by the public view (read-only) and the admin Brands tab.
"""
import flet as ft

from core.list_controller import BrandListController
from core.query_params import QueryParamSynchronizer, build_route, parse_route
from core.sorting import SortConfig
from ui.admin_constants import DESKTOP_COLUMNS, GRID_RUN_SPACING, GRID_SPACING
from ui.admin_utils import run_in_background
from ui.brand_card import build_brand_card
from ui.search_bar import build_search_bar
from ui.sort_bar import build_sort_bar


def build_brand_list(page: ft.Page, brand_service, notifier, is_desktop: bool,
                     on_edit=None, audit=None, allow_reorder=False):
    """
    Build the brand list section

    Args:
        page: Flet page object
        brand_service: core.brand_service.BrandService
        notifier: core.notifier.Notifier
        is_desktop: grid layout when True, single column otherwise
        on_edit: callback(brand) - admin only
        audit: callback(action) recording admin mutations
        allow_reorder: show the local drag-and-drop reorder mode

    Returns:
        (control, controller, on_navigate)
    """
    view_state = {"sort": SortConfig(), "manual": False}

    # ===================== CONTAINERS =====================

    brand_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS,
        max_extent=420,
        child_aspect_ratio=0.95,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True
    )
    brand_column = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)
    reorder_list = ft.ReorderableListView(expand=True)
    loading_ring = ft.Container(
        content=ft.ProgressRing(width=48, height=48),
        alignment=ft.alignment.center,
        padding=40,
        visible=False
    )
    empty_text = ft.Container(
        content=ft.Text("No brands found", size=14, color="grey", italic=True),
        alignment=ft.alignment.center,
        padding=20,
        visible=False
    )
    sort_holder = ft.Container(expand=True)
    list_holder = ft.Container(expand=True)

    # ===================== RENDER =====================

    def render():
        loading_ring.visible = controller.loading
        manual = view_state["manual"]
        sort_holder.content = build_sort_bar(lambda: view_state["sort"], on_sort, active=not manual)

        if manual:
            brands = list(controller.items)
            reorder_list.controls = [
                ft.Container(content=build_brand_card(b, on_edit=on_edit), key=str(b.brand_id))
                for b in brands
            ]
            list_holder.content = reorder_list
        else:
            brands = controller.sorted_items(view_state["sort"])
            cards = [build_brand_card(b, on_edit=on_edit) for b in brands]
            if is_desktop:
                brand_grid.controls = cards
                list_holder.content = brand_grid
            else:
                brand_column.controls = cards
                list_holder.content = brand_column

        list_holder.visible = not controller.loading
        empty_text.visible = not controller.loading and not brands
        page.update()

    controller = BrandListController(brand_service, notifier=notifier, on_change=render, audit=audit)

    # ===================== SORT / REORDER =====================

    def on_sort(key):
        view_state["manual"] = False
        view_state["sort"] = view_state["sort"].toggle(key)
        render()

    def toggle_manual(e=None):
        view_state["manual"] = not view_state["manual"]
        reorder_btn.text = "Done reordering" if view_state["manual"] else "Reorder"
        render()

    def on_reorder(e):
        controller.reorder(e.old_index, e.new_index)

    reorder_list.on_reorder = on_reorder
    reorder_btn = ft.TextButton("Reorder", icon=ft.Icons.DRAG_INDICATOR, on_click=toggle_manual, visible=allow_reorder)

    # ===================== URL SYNC =====================

    def navigate(params):
        path, _ = parse_route(page.route)
        page.go(build_route(path, params))

    synchronizer = QueryParamSynchronizer(
        navigate=navigate,
        on_search=lambda f: run_in_background(controller.search, f),
        on_url_change=lambda f: run_in_background(controller.handle_navigation, f),
    )
    search_bar, refresh_search_bar = build_search_bar(page, synchronizer)

    def on_navigate(params):
        synchronizer.on_navigate(params)
        refresh_search_bar()

    control = ft.Column([
        search_bar,
        ft.Row([sort_holder, reorder_btn], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        loading_ring,
        empty_text,
        list_holder
    ], expand=True, spacing=10)

    return control, controller, on_navigate
