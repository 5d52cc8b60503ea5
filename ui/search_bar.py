"""
Search bar bound to the URL query string
"""
import flet as ft

from core.query_params import QueryParamSynchronizer

PLACEHOLDERS = {
    "name": "Brand name",
    "product_tag": "Product tags",
    "location": "Location",
    "hall": "Hall",
}


def build_search_bar(page: ft.Page, synchronizer: QueryParamSynchronizer):
    """
    Build the four-field search form.

    Returns (control, refresh) - call refresh() after the URL changed so the
    inputs and the Clear button reflect the synchronizer's state.
    """
    inputs = {}

    def on_field_change(key, value):
        synchronizer.set_field(key, value)

    for key, label in PLACEHOLDERS.items():
        inputs[key] = ft.TextField(
            label=label,
            value=synchronizer.form.get(key, ""),
            on_change=lambda e, k=key: on_field_change(k, e.control.value),
            on_submit=lambda e: submit(),
            expand=True,
            text_size=13,
            height=44,
            border_radius=8
        )

    clear_btn = ft.TextButton("Clear", icon=ft.Icons.CLOSE, on_click=lambda e: clear())

    def refresh():
        for key, field in inputs.items():
            field.value = synchronizer.form.get(key, "")
        clear_btn.visible = synchronizer.has_params
        page.update()

    def submit():
        synchronizer.submit()
        refresh()

    def clear():
        synchronizer.clear()
        refresh()

    clear_btn.visible = synchronizer.has_params

    control = ft.Container(
        content=ft.Column([
            ft.ResponsiveRow([
                ft.Container(content=field, col={"sm": 12, "md": 6, "lg": 3})
                for field in inputs.values()
            ]),
            ft.Row([
                ft.ElevatedButton(
                    "Search",
                    icon=ft.Icons.SEARCH,
                    on_click=lambda e: submit(),
                    bgcolor="#2563EB",
                    color="white"
                ),
                clear_btn
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN)
        ], spacing=10),
        padding=15,
        bgcolor="white",
        border_radius=12
    )
    return control, refresh
