"""
Matching for locales written as POSIX locale names, such as 'en_US.UTF-8'
or 'de_DE@euro'. The form is described in The Open Group Base
Specifications, "Environment Variables":

    language[_territory][.codeset][@modifier]

Nothing here validates a locale name. Any string parses, though a malformed
one may parse into fields that don't mean anything.
"""
import logging

from .scoring import as_text, best_candidate

logger = logging.getLogger(__name__)

# How much agreement is worth on territory, codeset and modifier
POSIX_WEIGHTS = (4, 2, 1)


class PosixLocale:
    """
    A POSIX locale name split into its fields. `locale` is the original
    value, kept as it was given. The other fields are slices of its text in
    their original case; `territory`, `codeset` and `modifier` are None when
    their delimiter is missing, and may be '' when it's present with nothing
    after it.

    >>> PosixLocale.parse('en_US.UTF-8@dict')
    PosixLocale('en_US.UTF-8@dict', language='en', territory='US', codeset='UTF-8', modifier='dict')
    >>> PosixLocale.parse('fr.CP1252')
    PosixLocale('fr.CP1252', language='fr', codeset='CP1252')
    >>> PosixLocale.parse('_.@')
    PosixLocale('_.@', language='', territory='', codeset='', modifier='')
    """
    TERRITORY_DELIMITER = '_'
    CODESET_DELIMITER = '.'
    MODIFIER_DELIMITER = '@'

    FIELDS = ['language', 'territory', 'codeset', 'modifier']

    def __init__(self, locale, language, territory=None, codeset=None,
                 modifier=None):
        self.locale = locale
        self.language = language
        self.territory = territory
        self.codeset = codeset
        self.modifier = modifier

    @classmethod
    def parse(cls, locale) -> 'PosixLocale':
        """
        Split a locale name at its delimiters.

        Each field ends where the next delimiter is found. A delimiter is
        looked for anywhere in the string; when it's missing, its field ends
        where the following field does. Delimiters in the wrong order aren't
        detected, and produce fields that don't line up with what the writer
        meant. Because every delimiter is looked for in the whole string, a
        later field that happens to contain an earlier delimiter moves that
        boundary too, even when the delimiters that were meant are in order:

        >>> PosixLocale.parse('lang_region@modifier.codeset')
        PosixLocale('lang_region@modifier.codeset', language='lang', territory='region@modifier', modifier='modifier.codeset')

        >>> PosixLocale.parse('en.ISO_8859-1')
        PosixLocale('en.ISO_8859-1', language='en.ISO', codeset='ISO_8859-1')
        """
        text = as_text(locale)
        codeset_end = _find(text, cls.MODIFIER_DELIMITER, len(text))
        territory_end = _find(text, cls.CODESET_DELIMITER, codeset_end)
        language_end = _find(text, cls.TERRITORY_DELIMITER, territory_end)
        return cls(
            locale,
            language=text[:language_end],
            territory=_slice(text, language_end + 1, territory_end),
            codeset=_slice(text, territory_end + 1, codeset_end),
            modifier=_slice(text, codeset_end + 1, len(text)),
        )

    def secondary_fields(self) -> tuple:
        return (self.territory, self.codeset, self.modifier)

    def __repr__(self):
        items = [repr(self.locale), 'language={!r}'.format(self.language)]
        for field in self.FIELDS[1:]:
            if getattr(self, field) is not None:
                items.append('{0}={1!r}'.format(field, getattr(self, field)))
        return "PosixLocale({})".format(', '.join(items))


def _find(text, delimiter, default):
    position = text.find(delimiter)
    if position == -1:
        return default
    return position


def _slice(text, start, end):
    """
    Get text[start:end], or None if the range runs backwards.
    """
    if start > end:
        return None
    return text[start:end]


def _parsed_locales(locales):
    for locale in locales:
        try:
            yield PosixLocale.parse(locale)
        except TypeError as err:
            logger.debug("Ignoring locale %r: %s", locale, err)


def best_matching_locale(available_locales, user_locales):
    """
    Find the locale in `available_locales` that best matches the user's
    preferences in `user_locales`. Both are iterables of POSIX locale names,
    ordered from most to least preferred. Values that aren't str or bytes,
    such as None, are ignored.

    For each user locale in turn, the available locales with the same
    language (ignoring ASCII case) are scored by whether their territory,
    codeset and modifier agree with it, in that order of importance. A field
    that one side doesn't have matches anything. The first user locale that
    has any available locale in its language decides the result; if there's
    a tie, the available locale that comes first wins.

    The result is one of the objects from `available_locales`, exactly as it
    was given, or None if no user locale shares a language with any of them.

    >>> best_matching_locale(['en_US', 'en_GB', 'ru_UA', 'fr_FR', 'it'],
    ...                      ['ru_RU', 'ru', 'en_US', 'en'])
    'ru_UA'
    >>> best_matching_locale(['en', 'pt_BR', 'pt_PT', 'es'], ['pt', 'en'])
    'pt_BR'

    'fr.UTF-8' has no territory, so 'fr_CA.UTF-8' matches it better than
    'fr_FR' does:

    >>> best_matching_locale(['fr', 'fr_FR', 'fr_CA.UTF-8'], ['fr.UTF-8'])
    'fr_CA.UTF-8'
    """
    available = list(_parsed_locales(available_locales))
    user = _parsed_locales(user_locales)

    index = best_candidate(available, user, POSIX_WEIGHTS)
    if index is None:
        return None
    return available[index].locale
