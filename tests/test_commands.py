"""
Tests for the langtag management command.
"""

import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError


def run(*args, **options):
    out = StringIO()
    err = StringIO()
    call_command("langtag", *args, stdout=out, stderr=err, **options)
    return out.getvalue(), err.getvalue()


class TestLangtagCommand:
    def test_prints_canonical_tags(self):
        out, err = run("EN-us", "zh-hant", "SL-rozaj")
        assert out.splitlines() == ["en-US", "zh-Hant", "sl-rozaj"]
        assert err == ""

    def test_skips_empty_tags(self):
        out, _ = run("", "de")
        assert out.splitlines() == ["de"]

    def test_language_only(self):
        out, _ = run("zh-cmn-Hans-CN", "sr-Latn", language=True)
        assert out.splitlines() == ["zh-cmn", "sr"]

    def test_json(self):
        out, _ = run("de-CH-1901", json=True)
        assert json.loads(out) == {
            "tag": "de-CH-1901",
            "language": "de",
            "primary_language": "de",
            "extended_language_subtags": [],
            "script": "",
            "region": "CH",
            "variants": ["1901"],
            "extensions": [],
            "private_use": "",
        }

    def test_malformed_tags_are_reported(self):
        out = StringIO()
        err = StringIO()
        with pytest.raises(CommandError, match="2 malformed"):
            call_command("langtag", "en", "e", "en-a", stdout=out, stderr=err)
        assert out.getvalue().splitlines() == ["en"]
        lines = err.getvalue().splitlines()
        assert len(lines) == 2
        assert "'e'" in lines[0]
        assert "'en-a'" in lines[1]
