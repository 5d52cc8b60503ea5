"""Tests for BrandService and ExhibitorService envelope handling and errors."""

from unittest.mock import MagicMock

import pytest

from core.brand_service import BrandService
from core.errors import ApiError, ValidationError
from core.exhibitor_service import ExhibitorService
from models.brand import BrandPayload
from models.exhibitor import ExhibitorPayload
from models.search_filter import SearchFilter


@pytest.fixture
def client():
    return MagicMock()


class TestListBrands:

    def test_unwraps_data(self, client):
        client.get.return_value = {"data": [{"BrandID": 4, "brand_name": "Lego", "stand_number": 12}]}
        brands = BrandService(client).list_brands()

        client.get.assert_called_once_with("/brands")
        assert [b.brand_name for b in brands] == ["Lego"]
        assert brands[0].brand_id == 4
        assert brands[0].stand_number == "12"

    def test_missing_or_null_data_is_empty(self, client):
        client.get.return_value = {}
        assert BrandService(client).list_brands() == []
        client.get.return_value = {"data": None}
        assert BrandService(client).list_brands() == []

    def test_null_brand_name_keeps_the_list(self, client):
        client.get.return_value = {"data": [
            {"BrandID": 1, "brand_name": "Lego"},
            {"BrandID": 2, "brand_name": None},
        ]}
        brands = BrandService(client).list_brands()

        assert [b.brand_id for b in brands] == [1, 2]
        assert brands[1].brand_name == ""

    def test_failure_has_generic_message(self, client):
        client.get.side_effect = ApiError("Could not connect to the server")
        with pytest.raises(ApiError) as exc_info:
            BrandService(client).list_brands()
        assert exc_info.value.message == "Failed to fetch brands"
        assert "connect" not in str(exc_info.value)

    def test_malformed_envelope(self, client):
        client.get.return_value = {"data": "not a list"}
        with pytest.raises(ApiError, match="Failed to fetch brands"):
            BrandService(client).list_brands()


class TestSearchBrands:

    def test_requires_filter(self, client):
        with pytest.raises(ValidationError):
            BrandService(client).search_brands(None)
        client.get.assert_not_called()

    def test_sends_filter_and_unwraps_brands(self, client):
        client.get.return_value = {"brands": [{"BrandID": 1, "brand_name": "Hasbro"}]}
        result = BrandService(client).search_brands(SearchFilter(name="has", hall=""))

        client.get.assert_called_once_with("/brands/search", params={"name": "has", "hall": ""})
        assert [b.brand_name for b in result] == ["Hasbro"]

    def test_no_results(self, client):
        client.get.return_value = {"brands": None}
        assert BrandService(client).search_brands(SearchFilter(name="x")) == []

    def test_failure(self, client):
        client.get.side_effect = ApiError("boom", status_code=500)
        with pytest.raises(ApiError, match="Failed to search brands"):
            BrandService(client).search_brands(SearchFilter(name="x"))


class TestBrandMutations:

    def payload(self):
        return BrandPayload(brand_name="Lego", exhibitor_id="7")

    def test_add_requires_payload(self, client):
        with pytest.raises(ValidationError, match="Brand data is required"):
            BrandService(client).add_brand(None)
        client.post.assert_not_called()

    def test_add_posts_payload(self, client):
        client.post.return_value = {"message": "created", "data": {"BrandID": 9}}
        envelope = BrandService(client).add_brand(self.payload())

        path, body = client.post.call_args[0]
        assert path == "/brands/add"
        assert body["brand_name"] == "Lego"
        assert body["exhibitor_id"] == "7"
        assert envelope.message == "created"

    def test_add_keeps_field_errors(self, client):
        client.post.side_effect = ApiError("invalid", status_code=422, errors={"brand_name": "Taken"})
        with pytest.raises(ApiError) as exc_info:
            BrandService(client).add_brand(self.payload())
        assert exc_info.value.message == "Failed to add brand"
        assert exc_info.value.errors == {"brand_name": "Taken"}

    def test_edit_requires_id_and_payload(self, client):
        service = BrandService(client)
        with pytest.raises(ValidationError):
            service.edit_brand(None, self.payload())
        with pytest.raises(ValidationError):
            service.edit_brand(3, None)
        client.post.assert_not_called()

    def test_edit_posts_to_record_path(self, client):
        client.post.return_value = {"data": {"BrandID": 3}}
        BrandService(client).edit_brand(3, {"brand_name": "New", "exhibitor_id": "7"})
        assert client.post.call_args[0][0] == "/brands/edit/3"


class TestExhibitorService:

    def test_list_returns_envelope(self, client):
        client.get.return_value = {"data": [{"ExhibitorID": 1, "name": "Jane"}, {"exhibitor_id": 2, "company_name": "Acme"}]}
        envelope = ExhibitorService(client).list_exhibitors()

        client.get.assert_called_once_with("/brands/exhibitor/display")
        assert [x.exhibitor_id for x in envelope.data] == [1, 2]
        assert envelope.data[1].display_label == "Acme"

    def test_list_failure(self, client):
        client.get.side_effect = ApiError("down")
        with pytest.raises(ApiError, match="Failed to fetch exhibitors"):
            ExhibitorService(client).list_exhibitors()

    def test_add_requires_payload(self, client):
        with pytest.raises(ValidationError, match="Exhibitor data is required"):
            ExhibitorService(client).add_exhibitor(None)

    def test_add_posts(self, client):
        client.post.return_value = {"message": "ok"}
        ExhibitorService(client).add_exhibitor(ExhibitorPayload(name="Jane", company="Acme"))
        path, body = client.post.call_args[0]
        assert path == "/brands/exhibitor/add"
        assert body == {"name": "Jane", "position": "", "company": "Acme", "profile_picture": ""}
