"""Tests for the brand and exhibitor form state."""

from unittest.mock import MagicMock

import pytest

from core.errors import ApiError
from core.form_state import EXHIBITOR_LOAD_ERROR, GENERAL_ERROR, BrandFormState, ExhibitorFormState
from models.brand import Brand, BrandPayload


def filled_form(**overrides):
    form = BrandFormState()
    values = {"brand_name": "Lego", "exhibitor_id": "7", "stand_number": "A1"}
    values.update(overrides)
    for key, value in values.items():
        form.set_value(key, value)
    return form


class TestSeeding:

    def test_new_form_is_empty(self):
        form = BrandFormState()
        assert set(form.values.values()) == {""}

    def test_seed_from_brand(self, brands):
        form = BrandFormState(brands[0])
        assert form.values["brand_name"] == "zeta"
        assert form.values["stand_number"] == "A10"
        assert form.values["image_url"] == ""
        assert form.values["exhibitor_id"] == ""

    def test_reseed_when_record_changes(self, brands):
        form = BrandFormState(brands[0])
        form.set_value("brand_name", "typed")

        form.seed(brands[0])
        assert form.values["brand_name"] == "typed"

        form.seed(brands[1])
        assert form.values["brand_name"] == "Alpha"


class TestExhibitorOptions:

    def test_options_use_name_then_company(self, exhibitor_service):
        form = BrandFormState()
        assert form.load_exhibitors(exhibitor_service) is True
        assert form.exhibitor_options == [("7", "Jane Roe"), ("8", "Blocks Ltd")]
        assert form.loading_exhibitors is False

    def test_load_failure_is_a_field_error(self, exhibitor_service):
        exhibitor_service.list_exhibitors.side_effect = ApiError("Failed to fetch exhibitors")
        form = filled_form()

        assert form.load_exhibitors(exhibitor_service) is False
        assert form.errors == {"exhibitor_id": EXHIBITOR_LOAD_ERROR}
        # other fields stay editable
        form.set_value("hall", "B")
        assert form.values["hall"] == "B"


class TestSubmit:

    def test_success_calls_mutation_with_payload(self):
        mutation = MagicMock()
        form = filled_form()

        assert form.submit(mutation) is True
        mutation.assert_called_once()
        sent = mutation.call_args.args[0]
        assert isinstance(sent, BrandPayload)
        assert sent.brand_name == "Lego"
        assert sent.stand_number == "A1"
        assert form.errors == {}
        assert form.submitting is False

    def test_required_fields_block_submit(self):
        mutation = MagicMock()
        form = filled_form(brand_name="  ", exhibitor_id="")

        assert form.submit(mutation) is False
        mutation.assert_not_called()
        assert set(form.errors) == {"brand_name", "exhibitor_id"}

    def test_server_field_errors_land_on_inputs(self):
        mutation = MagicMock(side_effect=ApiError("Failed to add brand", errors={"brand_name": "Already exists"}))
        form = filled_form()

        assert form.submit(mutation) is False
        assert form.errors == {"brand_name": "Already exists"}
        assert form.submitting is False

    def test_unknown_field_errors_become_general(self):
        mutation = MagicMock(side_effect=ApiError("Failed", errors={"hall": "Bad hall", "token": "expired"}))
        form = filled_form()

        form.submit(mutation)
        assert form.errors == {"hall": "Bad hall", GENERAL_ERROR: "expired"}

    def test_plain_error_becomes_general(self):
        mutation = MagicMock(side_effect=ApiError("No brand selected for editing"))
        form = filled_form()

        form.submit(mutation)
        assert form.errors == {GENERAL_ERROR: "No brand selected for editing"}

    def test_submit_clears_previous_errors(self):
        form = filled_form()
        form.errors = {"hall": "old"}
        form.submit(MagicMock())
        assert form.errors == {}

    def test_unexpected_errors_propagate(self):
        form = filled_form()
        with pytest.raises(RuntimeError):
            form.submit(MagicMock(side_effect=RuntimeError("bug")))
        assert form.submitting is False


def test_exhibitor_form_requires_name():
    form = ExhibitorFormState()
    mutation = MagicMock()
    assert form.submit(mutation) is False
    assert "name" in form.errors

    form.set_value("name", "Jane")
    form.set_value("company", "Acme")
    assert form.submit(mutation) is True
    assert mutation.call_args.args[0].company == "Acme"


def test_edit_form_round_trip():
    mutation = MagicMock()
    form = BrandFormState(Brand(BrandID=5, brand_name="Playmobil", hall="C", exhibitor_id="8"))
    assert form.submit(mutation) is True
    assert mutation.call_args.args[0].hall == "C"
