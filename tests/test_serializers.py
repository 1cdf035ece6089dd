"""
Tests for JSON serialization of language tags with Django REST framework.
"""

import json

import pytest
from rest_framework import serializers
from rest_framework.renderers import JSONRenderer

from language.langtag import parse
from language.serializers import LanguageTagField, LanguageTagSerializer


class SettingsSerializer(serializers.Serializer):
    languages = serializers.ListField(child=LanguageTagField())
    default_language = LanguageTagField()


class TestLanguageTagField:
    def test_to_representation(self):
        assert LanguageTagField().to_representation(parse("en-us")) == "en-US"

    def test_to_internal_value(self):
        assert LanguageTagField().run_validation("EN-gb") == parse("en-GB")

    @pytest.mark.parametrize("data, code", [
        ("invalid-t", "malformed"),
        ("", "blank"),
        ("  ", "blank"),
        (12, "invalid"),
        (["en"], "invalid"),
    ])
    def test_errors(self, data, code):
        with pytest.raises(serializers.ValidationError) as exc_info:
            LanguageTagField().run_validation(data)
        assert exc_info.value.detail[0].code == code

    def test_malformed_message_names_subtag(self):
        with pytest.raises(serializers.ValidationError) as exc_info:
            LanguageTagField().run_validation("en-US-Latn")
        assert "'Latn'" in str(exc_info.value.detail[0])


class TestSerialization:
    def test_list_of_tags(self):
        data = {
            "languages": [parse("en-US"), parse("en-GB"), parse("de-DE"), parse("fr-FR")],
            "default_language": parse("en-US"),
        }
        rendered = JSONRenderer().render(SettingsSerializer(data).data)
        assert json.loads(rendered) == {
            "languages": ["en-US", "en-GB", "de-DE", "fr-FR"],
            "default_language": "en-US",
        }

    def test_deserialize(self):
        serializer = SettingsSerializer(data={
            "languages": ["en-us", "DE"],
            "default_language": "en-us",
        })
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["languages"] == [parse("en-US"), parse("de")]
        assert serializer.validated_data["default_language"] == parse("en-US")

    def test_deserialize_malformed(self):
        serializer = SettingsSerializer(data={
            "languages": ["en"],
            "default_language": "x-private",
        })
        assert not serializer.is_valid()
        assert serializer.errors["default_language"][0].code == "malformed"


class TestLanguageTagSerializer:
    def test_breakdown(self):
        data = LanguageTagSerializer(parse("zh-cmn-Hans-CN-u-ca-chinese-x-private")).data
        assert data == {
            "tag": "zh-cmn-Hans-CN-u-ca-chinese-x-private",
            "language": "zh-cmn",
            "primary_language": "zh",
            "extended_language_subtags": ["cmn"],
            "script": "Hans",
            "region": "CN",
            "variants": [],
            "extensions": ["u-ca-chinese"],
            "private_use": "x-private",
        }
