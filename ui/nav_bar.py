import flet as ft


def build_nav_bar(page: ft.Page):
    """Top navigation between the public and admin views."""
    return ft.Container(
        content=ft.Row([
            ft.TextButton("User View", on_click=lambda e: page.go("/")),
            ft.TextButton("Admin View", on_click=lambda e: page.go("/admin")),
        ], spacing=5),
        bgcolor="white",
        padding=ft.padding.symmetric(horizontal=15, vertical=8),
        border=ft.border.only(bottom=ft.BorderSide(1, "grey300"))
    )
