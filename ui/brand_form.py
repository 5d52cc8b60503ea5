"""
Add / Edit brand dialogs
"""
import flet as ft

from core.form_state import GENERAL_ERROR, BrandFormState
from ui.admin_utils import close_dialog, run_in_background

LABELS = {
    "brand_name": "Brand Name *",
    "image_url": "Image URL",
    "description": "Description",
    "location": "Location",
    "hall": "Hall",
    "stand_number": "Stand Number",
    "product_tag": "Product Tags",
}

HINTS = {
    "brand_name": "Enter brand name",
    "image_url": "https://example.com/image.jpg",
    "description": "Enter brand description",
    "location": "e.g., London",
    "hall": "e.g., A",
    "stand_number": "e.g., A1",
    "product_tag": "Enter tags separated by commas",
}


def show_brand_dialog(page: ft.Page, exhibitor_service, on_submit, brand=None, on_close=None):
    """
    Open the add dialog (brand=None) or the edit dialog for `brand`.

    Args:
        page: Flet page object
        exhibitor_service: used to fill the exhibitor select
        on_submit: mutation callback(payload); raises ApiError on failure
        brand: record to edit, None to add
        on_close: called after the dialog closes (cancel or success)
    """
    form = BrandFormState(brand)
    is_edit = brand is not None

    # ===================== FIELDS =====================

    text_fields = {}
    for key, label in LABELS.items():
        text_fields[key] = ft.TextField(
            label=label,
            value=form.values[key],
            hint_text=None if is_edit else HINTS[key],
            multiline=key == "description",
            min_lines=3 if key == "description" else 1,
            on_change=lambda e, k=key: form.set_value(k, e.control.value),
            width=300
        )

    exhibitor_dropdown = ft.Dropdown(
        label="Exhibitor *",
        value=form.values["exhibitor_id"] or None,
        options=[],
        disabled=True,
        on_change=lambda e: form.set_value("exhibitor_id", e.control.value),
        width=300
    )

    general_error = ft.Text("", color="red", size=12)

    submit_btn = ft.ElevatedButton(
        "Save Changes" if is_edit else "Add Brand",
        bgcolor="#2563EB",
        color="white"
    )
    cancel_btn = ft.TextButton("Cancel")

    def show_errors():
        for key, field in text_fields.items():
            field.error_text = form.errors.get(key)
        exhibitor_dropdown.error_text = form.errors.get("exhibitor_id")
        general_error.value = form.errors.get(GENERAL_ERROR, "")
        page.update()

    # ===================== EXHIBITORS =====================

    def load_exhibitors():
        form.load_exhibitors(exhibitor_service)
        exhibitor_dropdown.options = [
            ft.dropdown.Option(key=value, text=label) for value, label in form.exhibitor_options
        ]
        exhibitor_dropdown.disabled = False
        show_errors()

    # ===================== SUBMIT =====================

    def close(e=None):
        close_dialog(page, dialog)
        if on_close:
            on_close()

    def do_submit():
        ok = form.submit(on_submit)
        submit_btn.disabled = False
        cancel_btn.disabled = False
        submit_btn.text = "Save Changes" if is_edit else "Add Brand"
        if ok:
            close()
        else:
            show_errors()

    def handle_submit(e):
        submit_btn.disabled = True
        cancel_btn.disabled = True
        submit_btn.text = "Saving..." if is_edit else "Adding..."
        form.errors = {}
        show_errors()
        run_in_background(do_submit)

    submit_btn.on_click = handle_submit
    cancel_btn.on_click = close

    # ===================== DIALOG =====================

    if is_edit:
        title_text = f"Edit {brand.brand_name[:22]}..." if len(brand.brand_name) > 22 else f"Edit {brand.brand_name}"
    else:
        title_text = "Add New Brand"

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title_text, size=16, weight="bold", overflow=ft.TextOverflow.ELLIPSIS, max_lines=1),
        content=ft.Container(
            content=ft.Column([
                text_fields["brand_name"],
                text_fields["image_url"],
                text_fields["description"],
                text_fields["location"],
                text_fields["hall"],
                text_fields["stand_number"],
                text_fields["product_tag"],
                exhibitor_dropdown,
                general_error
            ], tight=True, scroll=ft.ScrollMode.AUTO, horizontal_alignment=ft.CrossAxisAlignment.CENTER),
            width=320,
            height=540,
            alignment=ft.alignment.top_center
        ),
        actions=[cancel_btn, submit_btn]
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()

    run_in_background(load_exhibitors)
    return dialog
