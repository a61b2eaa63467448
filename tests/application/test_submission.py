"""Unit tests for product form validation and normalization."""

import pytest

from catalog.application.dto import PictureUpload
from catalog.application.submission import MAX_PICTURE_SIZE, inspect_picture, parse_submission
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Condition
from catalog.domain.model.value_objects import Money
from tests.fakes import fake_image


class TestParseSubmissionHappyPath:

    def test_normalizes_valid_form(self, valid_data):
        submission = parse_submission(valid_data)
        assert submission.category_id == "1"
        assert submission.name == "New name"
        assert submission.description == "New description"
        assert submission.brand == "New brand"
        assert submission.cost == Money(649)
        assert submission.price == Money(749)
        assert submission.stock == 5
        assert submission.low_stock == 1
        assert submission.condition is Condition.NEW
        assert submission.status is True
        assert submission.features == {
            "weight": "New weight",
            "dimensions": "New dimensions",
            "color": "New color",
        }
        assert submission.pictures_to_store == []
        assert submission.pictures_to_delete == []

    def test_integer_category_becomes_string_id(self, valid_data):
        valid_data["category"] = 7
        assert parse_submission(valid_data).category_id == "7"

    def test_counts_may_arrive_as_strings(self, valid_data):
        valid_data["stock"] = "10"
        valid_data["low_stock"] = "0"
        submission = parse_submission(valid_data)
        assert submission.stock == 10
        assert submission.low_stock == 0

    @pytest.mark.parametrize("raw", [True, 1, "1", "true", "TRUE"])
    def test_status_truthy_values(self, valid_data, raw):
        valid_data["status"] = raw
        assert parse_submission(valid_data).status is True

    @pytest.mark.parametrize("raw", [False, 0, "0", "false"])
    def test_status_falsy_values(self, valid_data, raw):
        valid_data["status"] = raw
        assert parse_submission(valid_data).status is False

    def test_condition_is_case_insensitive(self, valid_data):
        valid_data["condition"] = "Used"
        assert parse_submission(valid_data).condition is Condition.USED

    def test_extra_features_are_kept(self, valid_data):
        valid_data["features"]["material"] = "Oak"
        assert parse_submission(valid_data).features["material"] == "Oak"

    def test_text_fields_are_stripped(self, valid_data):
        valid_data["name"] = "  Padded  "
        assert parse_submission(valid_data).name == "Padded"

    def test_pictures_are_inspected(self, valid_data):
        valid_data["pictures"] = {
            "storing": [fake_image("foo.jpg"), fake_image("bar.png", "PNG")],
            "deleting": ["images/products/old.jpg"],
        }
        submission = parse_submission(valid_data)
        assert [p.extension for p in submission.pictures_to_store] == ["jpg", "png"]
        assert submission.pictures_to_delete == ["images/products/old.jpg"]


class TestParseSubmissionErrors:

    def test_empty_form_reports_every_required_field(self):
        with pytest.raises(ValidationError) as info:
            parse_submission({})
        assert set(info.value.errors) == {
            "category", "name", "description", "brand", "cost", "price",
            "stock", "low_stock", "condition", "status", "features",
        }

    def test_blank_name_rejected(self, valid_data):
        valid_data["name"] = "   "
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert info.value.errors == {"name": "This field is required"}

    def test_bad_money_rejected(self, valid_data):
        valid_data["cost"] = "abc"
        valid_data["price"] = "-7.49"
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert set(info.value.errors) == {"cost", "price"}

    def test_negative_stock_rejected(self, valid_data):
        valid_data["stock"] = -1
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert info.value.errors == {"stock": "Cannot be negative"}

    def test_bool_stock_rejected(self, valid_data):
        valid_data["stock"] = True
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert "stock" in info.value.errors

    def test_non_ascii_digits_rejected(self, valid_data):
        valid_data["stock"] = "\u00b2"
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert info.value.errors == {"stock": "Must be a whole number"}

    def test_huge_price_rejected(self, valid_data):
        valid_data["price"] = "1e30"
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert set(info.value.errors) == {"price"}

    def test_unknown_condition_rejected(self, valid_data):
        valid_data["condition"] = "refurbished"
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert info.value.errors["condition"] == "Must be one of: new, used"

    def test_unknown_status_rejected(self, valid_data):
        valid_data["status"] = "maybe"
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert "status" in info.value.errors

    def test_missing_required_feature_reported_by_key(self, valid_data):
        del valid_data["features"]["color"]
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert info.value.errors == {"features.color": "This feature is required"}

    def test_empty_feature_value_rejected(self, valid_data):
        valid_data["features"]["weight"] = ""
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert "features.weight" in info.value.errors

    def test_non_image_upload_rejected(self, valid_data):
        valid_data["pictures"] = {
            "storing": [fake_image("ok.jpg"), PictureUpload("notes.jpg", b"not an image")],
        }
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert info.value.errors == {"pictures.storing.1": "notes.jpg is not a valid image"}

    def test_raw_bytes_are_not_an_upload(self, valid_data):
        valid_data["pictures"] = {"storing": [b"\xff\xd8"]}
        with pytest.raises(ValidationError) as info:
            parse_submission(valid_data)
        assert "pictures.storing.0" in info.value.errors

    def test_message_lists_failing_fields(self, valid_data):
        valid_data["name"] = ""
        valid_data["cost"] = "x"
        with pytest.raises(ValidationError, match="Invalid product data: cost, name"):
            parse_submission(valid_data)


class TestInspectPicture:

    def test_extension_comes_from_content_not_filename(self):
        image = inspect_picture(fake_image("photo.jpg", "PNG"))
        assert image.extension == "png"

    def test_gif_and_webp_accepted(self):
        assert inspect_picture(fake_image("a.gif", "GIF")).extension == "gif"
        assert inspect_picture(fake_image("a.webp", "WEBP")).extension == "webp"

    def test_unsupported_format_rejected(self):
        with pytest.raises(ValidationError, match="unsupported image format BMP"):
            inspect_picture(fake_image("a.bmp", "BMP"))

    def test_empty_upload_rejected(self):
        with pytest.raises(ValidationError, match="is empty"):
            inspect_picture(PictureUpload("empty.jpg", b""))

    def test_oversized_upload_rejected(self):
        with pytest.raises(ValidationError, match="larger than 5MB"):
            inspect_picture(PictureUpload("huge.jpg", b"\0" * (MAX_PICTURE_SIZE + 1)))
