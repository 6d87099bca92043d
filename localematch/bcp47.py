"""
Matching for locales written as BCP 47 language tags, like 'en-US' or
'zh-cmn-Hans-SG'.
"""
import logging

from .scoring import as_text, best_candidate
from .tag_parser import LanguageTagError, parse_tag

logger = logging.getLogger(__name__)

# How much agreement on each secondary subtag is worth, in the order of
# LanguageTag.SECONDARY_ATTRIBUTES: extlang, script, region, variant,
# extension, private use. Each weight is more than all later ones combined.
BCP47_WEIGHTS = (32, 16, 8, 4, 2, 1)


def _parse_or_none(locale):
    try:
        return parse_tag(as_text(locale))
    except (LanguageTagError, TypeError) as err:
        logger.debug("Ignoring malformed locale %r: %s", locale, err)
        return None


def _parsed_user_tags(user_locales):
    for locale in user_locales:
        tag = _parse_or_none(locale)
        if tag is not None:
            yield tag


def best_matching_locale(available_locales, user_locales):
    """
    Find the locale in `available_locales` that best matches the user's
    preferences in `user_locales`. Both are iterables of BCP 47 tags, ordered
    from most to least preferred. Tags that aren't well-formed are ignored,
    and so are values that aren't str or bytes, such as None.

    For each user locale in turn, the available locales with the same
    primary language are scored by which of their other subtags agree with
    it, giving more weight to the ones that come earlier in a tag. A subtag
    that one side doesn't have matches anything. The first user locale that
    has any available locale in its language decides the result; if there's
    a tie, the available locale that comes first wins.

    The result is one of the objects from `available_locales`, exactly as it
    was given, or None if no user locale shares a language with any of them.

    >>> best_matching_locale(['en-US', 'en-GB', 'ru-UA', 'fr-FR', 'it'],
    ...                      ['ru-RU', 'ru', 'en-US', 'en'])
    'ru-UA'

    'pt-BR' and 'pt-PT' are equally good for 'pt', so the first one wins:

    >>> best_matching_locale(['en', 'pt-BR', 'pt-PT', 'es'], ['pt', 'en'])
    'pt-BR'

    'zh-Hans' doesn't say anything about an extended language, so it matches
    'cmn' as well as anything:

    >>> best_matching_locale(['zh', 'zh-cmn', 'zh-cmn-Hans'], ['zh-Hans'])
    'zh-cmn-Hans'

    Comparison ignores case, but the result keeps the case it was given in:

    >>> best_matching_locale(['EN'], ['en'])
    'EN'

    >>> best_matching_locale(['en-US-SUS-BUS-VUS-GUS'], ['en']) is None
    True
    >>> best_matching_locale([None, 'en'], ['none', 'en'])
    'en'
    """
    available = []
    available_tags = []
    for locale in available_locales:
        tag = _parse_or_none(locale)
        if tag is not None:
            available.append(locale)
            available_tags.append(tag)

    index = best_candidate(available_tags, _parsed_user_tags(user_locales),
                           BCP47_WEIGHTS)
    if index is None:
        return None
    return available[index]
