from rest_framework import serializers

from language.langtag import LanguageTag, parse
from language.tags import MalformedTagError


class LanguageTagField(serializers.Field):
    """Serializes a `LanguageTag` as its canonical string."""
    default_error_messages = {
        'invalid': "A language tag string is required.",
        'blank': "This field may not be blank.",
        'malformed': "Malformed language tag: {reason} ('{subtag}').",
    }

    def to_representation(self, value: LanguageTag) -> str:
        return str(value)

    def to_internal_value(self, data) -> LanguageTag:
        if not isinstance(data, str):
            self.fail('invalid')
        try:
            tag = parse(data)
        except MalformedTagError as e:
            self.fail('malformed', reason=e.reason, subtag=e.subtag)
        if tag is None:
            self.fail('blank')
        return tag


class LanguageTagSerializer(serializers.Serializer):
    tag = serializers.SerializerMethodField()
    language = serializers.CharField(read_only=True)
    primary_language = serializers.CharField(read_only=True)
    extended_language_subtags = serializers.ListField(
        child=serializers.CharField(), read_only=True)
    script = serializers.CharField(read_only=True)
    region = serializers.CharField(read_only=True)
    variants = serializers.ListField(
        child=serializers.CharField(), read_only=True)
    extensions = serializers.ListField(
        child=serializers.CharField(), read_only=True)
    private_use = serializers.CharField(read_only=True)

    def get_tag(self, obj: LanguageTag) -> str:
        return str(obj)
