"""
Sort controls for brand lists
"""
import flet as ft

from core.sorting import SORT_FIELDS


def build_sort_bar(get_config, on_sort, active=True):
    """
    One button per sort key. The active key shows an arrow for its direction.

    Args:
        get_config: returns the current SortConfig
        on_sort: callback(key) when a button is clicked
        active: False while another ordering (manual reorder) is shown
    """
    config = get_config()
    buttons = []
    for key, label in SORT_FIELDS.items():
        is_current = active and key == config.key
        icon = None
        if is_current:
            icon = ft.Icons.ARROW_UPWARD if config.ascending else ft.Icons.ARROW_DOWNWARD
        buttons.append(
            ft.OutlinedButton(
                label,
                icon=icon,
                on_click=lambda e, k=key: on_sort(k),
                style=ft.ButtonStyle(
                    bgcolor="#2563EB" if is_current else "white",
                    color="white" if is_current else "black",
                    shape=ft.RoundedRectangleBorder(radius=20)
                )
            )
        )
    return ft.Row(
        [ft.Text("Sort by:", size=12, color="grey700")] + buttons,
        spacing=6,
        scroll=ft.ScrollMode.AUTO
    )
