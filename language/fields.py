from django.core.exceptions import ValidationError
from django.db import models

from language.forms import LanguageTagFormField
from language.langtag import LanguageTag, parse
from language.tags import MalformedTagError

# RFC 5646 section 4.4.1 asks for at least 35 characters
DEFAULT_MAX_LENGTH = 64


class LanguageTagField(models.CharField):
    """Stores a `LanguageTag` as its canonical string.
    """
    description = "RFC 5646 language tag"
    default_error_messages = {
        'malformed_tag': "'%(value)s' is not a valid language tag: %(reason)s",
    }

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('max_length', DEFAULT_MAX_LENGTH)
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        if kwargs.get('max_length') == DEFAULT_MAX_LENGTH:
            del kwargs['max_length']
        return name, path, args, kwargs

    def from_db_value(self, value, expression, connection):
        return self.to_python(value)

    def to_python(self, value):
        if value is None or isinstance(value, LanguageTag):
            return value
        if not isinstance(value, str):
            raise ValidationError(
                self.error_messages['malformed_tag'],
                code='malformed_tag',
                params={'value': value, 'reason': "expected a string"},
            )
        try:
            return parse(value)
        except MalformedTagError as e:
            raise ValidationError(
                self.error_messages['malformed_tag'],
                code='malformed_tag',
                params={'value': value, 'reason': e.reason},
            ) from e

    def get_prep_value(self, value):
        value = self.to_python(value)
        if value is None:
            return None if self.null else ''
        return str(value)

    def value_to_string(self, obj):
        return self.get_prep_value(self.value_from_object(obj))

    def run_validators(self, value):
        if isinstance(value, LanguageTag):
            value = str(value)
        super().run_validators(value)

    def formfield(self, **kwargs):
        return super().formfield(**{
            'form_class': LanguageTagFormField,
            **kwargs,
        })
