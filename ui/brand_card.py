"""
Brand card shared by the public list and the admin Brands tab
"""
import flet as ft

from ui.admin_constants import PLACEHOLDER_IMAGE


def build_brand_card(brand, on_edit=None):
    """
    Build a single brand card

    Args:
        brand: models.brand.Brand
        on_edit: callback(brand) - admin only; shows the edit button when given
    """
    header = [ft.Text(brand.brand_name, weight="bold", size=18, color="black", expand=True)]
    if on_edit:
        header.append(
            ft.IconButton(
                icon=ft.Icons.EDIT,
                icon_color="black",
                icon_size=18,
                tooltip="Edit brand",
                on_click=lambda e, b=brand: on_edit(b)
            )
        )

    details = [
        ft.Row(header, alignment=ft.MainAxisAlignment.SPACE_BETWEEN, spacing=5),
        ft.Text(brand.description or "", size=12, color="grey700", max_lines=2, overflow=ft.TextOverflow.ELLIPSIS),
        ft.Row([
            ft.Icon(ft.Icons.PLACE, size=14, color="grey600"),
            ft.Text(
                f"{brand.location or ''} - Hall {brand.hall or ''}, Stand {brand.stand_number or ''}",
                size=12,
                color="grey600"
            )
        ], spacing=4),
    ]

    if brand.exhibitor_company:
        details.append(ft.Row([
            ft.Icon(ft.Icons.BUSINESS, size=14, color="grey600"),
            ft.Text(brand.exhibitor_company, size=12, color="grey600")
        ], spacing=4))

    if brand.tags:
        details.append(ft.Row(
            [ft.Icon(ft.Icons.LOCAL_OFFER, size=14, color="grey600")] + [
                ft.Container(
                    content=ft.Text(tag, size=10, color="grey700"),
                    bgcolor="grey100",
                    border_radius=10,
                    padding=ft.padding.symmetric(horizontal=8, vertical=3)
                ) for tag in brand.tags
            ],
            wrap=True,
            spacing=4
        ))

    return ft.Card(
        content=ft.Container(
            content=ft.Column([
                ft.Image(
                    src=brand.image_url or PLACEHOLDER_IMAGE,
                    height=150,
                    fit=ft.ImageFit.COVER,
                    border_radius=8,
                    error_content=ft.Container(
                        height=150,
                        bgcolor="grey300",
                        border_radius=8,
                        alignment=ft.alignment.center,
                        content=ft.Icon(ft.Icons.STOREFRONT, size=30, color="grey600")
                    )
                ),
                *details
            ], spacing=6),
            padding=10,
            bgcolor="white",
            border_radius=12
        )
    )
