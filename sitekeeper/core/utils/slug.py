import re
import unicodedata

_CAMEL_BOUNDARY = re.compile(r'([a-z0-9])([A-Z])')
_NOT_SLUG_CHARS = re.compile(r'[^a-z0-9]+')


def _transliterate(raw: str) -> str:
    return unicodedata.normalize('NFKD', raw).encode('ascii', 'ignore').decode('ascii')


def slugify(raw: str) -> str:
    """
    Hostname-ish names to directory/schema names:
        docker.test -> docker-test
        My Site     -> my-site
        fooBar.dev  -> foo-bar-dev
        café.test   -> cafe-test
    """
    split = _CAMEL_BOUNDARY.sub(r'\1-\2', _transliterate(raw))
    return _NOT_SLUG_CHARS.sub('-', split.lower()).strip('-')
