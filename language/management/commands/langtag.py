import logging

from django.core.management.base import BaseCommand, CommandError, CommandParser
from rest_framework.renderers import JSONRenderer

from language.langtag import scan
from language.serializers import LanguageTagSerializer

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Prints the canonical form of RFC 5646 language tags"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("tags", nargs="+", metavar="tag")
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the subtags of each tag as JSON",
        )
        parser.add_argument(
            "--language",
            action="store_true",
            help="Print only the language and extended language subtags",
        )

    def handle(self, *args, **options) -> None:
        malformed = 0
        for text in options["tags"]:
            result = scan(text)
            if result.error is not None:
                logger.info("malformed language tag %r", text)
                self.stderr.write(str(result.error))
                malformed += 1
            elif result.ok:
                tag = result.tag
                if options["json"]:
                    data = JSONRenderer().render(LanguageTagSerializer(tag).data)
                    self.stdout.write(data.decode())
                elif options["language"]:
                    self.stdout.write(tag.language)
                else:
                    self.stdout.write(str(tag))
        if malformed:
            raise CommandError(f"{malformed} malformed language tag(s)")
