"""
Tests for the Django model and form fields storing language tags.
"""

import pytest
from django.core.exceptions import ValidationError

from language.fields import DEFAULT_MAX_LENGTH, LanguageTagField
from language.forms import LanguageTagFormField
from language.langtag import parse


class TestModelField:
    def test_to_python(self):
        field = LanguageTagField()
        assert field.to_python("en-us") == parse("en-US")
        assert field.to_python("") is None
        assert field.to_python(None) is None
        tag = parse("de")
        assert field.to_python(tag) is tag

    def test_to_python_malformed(self):
        with pytest.raises(ValidationError) as exc_info:
            LanguageTagField().to_python("en-US-Latn")
        assert exc_info.value.code == "malformed_tag"

    @pytest.mark.parametrize("value", [12, ["en"]])
    def test_to_python_not_a_string(self, value):
        with pytest.raises(ValidationError) as exc_info:
            LanguageTagField().to_python(value)
        assert exc_info.value.code == "malformed_tag"

    def test_from_db_value(self):
        tag = LanguageTagField().from_db_value("de-CH-1901", None, None)
        assert tag.region == "CH"
        assert tag.variants == ("1901",)

    def test_get_prep_value(self):
        field = LanguageTagField()
        assert field.get_prep_value(parse("zh-Hant")) == "zh-Hant"
        assert field.get_prep_value("EN-us") == "en-US"
        assert field.get_prep_value(None) == ""
        assert LanguageTagField(null=True).get_prep_value(None) is None

    def test_clean(self):
        field = LanguageTagField()
        assert field.clean("SR-latn-rs", None) == parse("sr-Latn-RS")
        with pytest.raises(ValidationError):
            field.clean("", None)

    def test_clean_checks_canonical_length(self):
        field = LanguageTagField(max_length=5)
        assert field.clean("en-us", None) == parse("en-US")
        with pytest.raises(ValidationError):
            field.clean("en-US-1901", None)

    def test_deconstruct(self):
        _, path, args, kwargs = LanguageTagField().deconstruct()
        assert path == "language.fields.LanguageTagField"
        assert args == []
        assert kwargs == {}
        _, _, _, kwargs = LanguageTagField(max_length=35).deconstruct()
        assert kwargs == {"max_length": 35}

    def test_formfield(self):
        formfield = LanguageTagField().formfield()
        assert isinstance(formfield, LanguageTagFormField)
        assert formfield.max_length == DEFAULT_MAX_LENGTH


class TestFormField:
    def test_clean(self):
        assert LanguageTagFormField().clean(" zh-hant-tw ") == parse("zh-Hant-TW")

    def test_malformed(self):
        with pytest.raises(ValidationError) as exc_info:
            LanguageTagFormField().clean("not a tag")
        assert exc_info.value.code == "malformed_tag"

    def test_required(self):
        with pytest.raises(ValidationError) as exc_info:
            LanguageTagFormField().clean("")
        assert exc_info.value.code == "required"
        assert LanguageTagFormField(required=False).clean("") is None

    def test_prepare_value(self):
        field = LanguageTagFormField()
        assert field.prepare_value(parse("en-GB")) == "en-GB"
        assert field.prepare_value("en-gb") == "en-gb"
