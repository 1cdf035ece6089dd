from django import forms
from django.core.exceptions import ValidationError

from language.langtag import LanguageTag, parse
from language.tags import MalformedTagError


class LanguageTagFormField(forms.CharField):
    default_error_messages = {
        'malformed_tag': "Enter a valid language tag, such as en-US.",
    }

    def prepare_value(self, value):
        if isinstance(value, LanguageTag):
            return str(value)
        return value

    def to_python(self, value):
        if isinstance(value, LanguageTag):
            return value
        value = super().to_python(value)
        try:
            return parse(value)
        except MalformedTagError as e:
            raise ValidationError(
                self.error_messages['malformed_tag'],
                code='malformed_tag',
            ) from e

    def run_validators(self, value):
        # length validators apply to the canonical string
        super().run_validators(self.prepare_value(value))
