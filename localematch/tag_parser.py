"""
This module implements a parser for language tags, according to the RFC 5646
(BCP 47) standard.

Here, we're only concerned with the syntax of the language tag. We don't look
up whether the subtags are registered; a tag like 'qq-Zzzz-QQ' is well-formed,
so it parses.

For a full description of the syntax of a language tag, see page 3 of
    http://tools.ietf.org/html/bcp47

>>> parse('en')
[('language', 'en')]

>>> parse('en-US')
[('language', 'en'), ('region', 'US')]

>>> parse('es-419')
[('language', 'es'), ('region', '419')]

>>> parse('zh-hant-tw')
[('language', 'zh'), ('script', 'Hant'), ('region', 'TW')]

>>> parse('zh-tw-hant')
Traceback (most recent call last):
    ...
localematch.tag_parser.LanguageTagError: This script subtag, 'hant', is out of place. Expected variant, extension, or end of string.

>>> parse('zh-cmn-Hans-SG')
[('language', 'zh'), ('extlang', 'cmn'), ('script', 'Hans'), ('region', 'SG')]

>>> parse('de-DE-1901')
[('language', 'de'), ('region', 'DE'), ('variant', '1901')]

>>> parse('i-klingon')
[('grandfathered', 'i-klingon')]

>>> parse('x-dothraki')
[('private', 'x-dothraki')]

>>> parse('en-u-co-phonebk-x-pig-latin')
[('language', 'en'), ('extension', 'u-co-phonebk'), ('private', 'x-pig-latin')]

>>> parse('en-x-pig-latin-u-co-phonebk')
[('language', 'en'), ('private', 'x-pig-latin-u-co-phonebk')]

Unlike looser parsers, this one is strict about separators: BCP 47 only
allows hyphens.

>>> parse('en_US')
Traceback (most recent call last):
    ...
localematch.tag_parser.LanguageTagError: Expected 1-8 ASCII letters or digits, got 'en_us'

>>> parse('u-co-phonebk')
Traceback (most recent call last):
    ...
localematch.tag_parser.LanguageTagError: Expected a language code, got 'u'
"""
import string

# These tags should not be parsed by the usual parser; they're grandfathered
# in from RFC 3066. The 'irregular' ones don't fit the syntax at all; the
# 'regular' ones do, but would give meaningless results when parsed.
#
# These are all lowercased so they can be matched case-insensitively, as the
# standard requires.
EXCEPTIONS = {
    # Irregular exceptions
    "en-gb-oed", "i-ami", "i-bnn", "i-default", "i-enochian", "i-hak",
    "i-klingon", "i-lux", "i-mingo", "i-navajo", "i-pwn", "i-tao", "i-tay",
    "i-tsu", "sgn-be-fr", "sgn-be-nl", "sgn-ch-de",

    # Regular exceptions
    "art-lojban", "cel-gaulish", "no-bok", "no-nyn", "zh-guoyu", "zh-hakka",
    "zh-min", "zh-min-nan", "zh-xiang"
}

# Define the order of subtags as integer constants, but also give them names
# so we can describe them in error messages
EXTLANG, SCRIPT, REGION, VARIANT, EXTENSION = range(5)
SUBTAG_TYPES = ['extlang', 'script', 'region', 'variant', 'extension',
                'end of string']

# str.isalpha() and friends accept any Unicode letter, but language tags are
# strictly ASCII.
ASCII_LETTERS = frozenset(string.ascii_lowercase)
ASCII_DIGITS = frozenset(string.digits)
ASCII_ALNUM = ASCII_LETTERS | ASCII_DIGITS
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_characters(tag):
    """
    BCP 47 is case-insensitive. So here we smash tags into lowercase, so we
    can make exact comparisons. Only ASCII letters are affected.

    >>> normalize_characters('zh-Hant-TW')
    'zh-hant-tw'
    >>> normalize_characters('RU-ЖЖЯЯ')
    'ru-ЖЖЯЯ'
    """
    return tag.translate(_ASCII_LOWER)


def _is_alpha(subtag):
    return all(char in ASCII_LETTERS for char in subtag)


def _is_digit(subtag):
    return all(char in ASCII_DIGITS for char in subtag)


def _is_alnum(subtag):
    return all(char in ASCII_ALNUM for char in subtag)


def parse(tag):
    """
    Parse the syntax of a language tag. Returns a list of (type, value)
    tuples, in the order they appear in the tag.
    """
    tag = normalize_characters(tag)
    if tag in EXCEPTIONS:
        return [('grandfathered', tag)]

    subtags = tag.split('-')
    for subtag in subtags:
        if not 1 <= len(subtag) <= 8 or not _is_alnum(subtag):
            subtag_error(subtag, '1-8 ASCII letters or digits')

    language = subtags[0]
    if language == 'x':
        return [parse_private(subtags)]
    elif len(language) >= 2 and _is_alpha(language):
        # Only the short language codes can be followed by extlangs
        if len(language) <= 3:
            expect = EXTLANG
        else:
            expect = SCRIPT
        return [('language', language)] + parse_subtags(subtags[1:], expect)
    else:
        subtag_error(language, 'a language code')


def parse_subtags(subtags, expect=EXTLANG):
    """
    Parse everything that comes after the language tag: scripts, regions,
    variants, and assorted extensions.

    This walks the subtags in a loop, carrying along the type of subtag we
    expect next, so a tag with any number of subtags can be parsed.
    """
    parsed = []
    variants = set()
    singletons = set()
    index = 0
    while index < len(subtags):
        subtag = subtags[index]
        tag_length = len(subtag)
        tagtype = None
        if tag_length == 1:
            if subtag == 'x':
                parsed.append(parse_private(subtags[index:]))
                break
            if subtag in singletons:
                raise LanguageTagError(
                    "The extension %r appears more than once" % subtag
                )
            singletons.add(subtag)
            extension, index = parse_extension(subtags, index)
            parsed.append(extension)
            expect = EXTENSION
            continue
        elif tag_length == 2:
            if _is_alpha(subtag):
                tagtype = REGION
        elif tag_length == 3:
            if _is_alpha(subtag):
                if expect <= EXTLANG:
                    extlangs, index = parse_extlang(subtags, index)
                    parsed.extend(extlangs)
                    expect = SCRIPT
                    continue
                else:
                    order_error(subtag, EXTLANG, expect)
            elif _is_digit(subtag):
                tagtype = REGION
        elif tag_length == 4:
            if _is_alpha(subtag):
                tagtype = SCRIPT
            elif subtag[0] in ASCII_DIGITS:
                tagtype = VARIANT
        else:  # tags of length 5-8
            tagtype = VARIANT

        if tagtype is None:
            # We haven't gone off to handle a singleton or extlangs, and we
            # haven't recognized a type of tag. This subtag just doesn't fit
            # the standard.
            subtag_error(subtag)
        elif tagtype < expect:
            # We got a tag type that was supposed to appear earlier in the order.
            order_error(subtag, tagtype, expect)

        # We've recognized a tag of a particular type. If it's a region or
        # script, increment what we expect, because there can be only one
        # of each.
        if tagtype in (SCRIPT, REGION):
            expect = tagtype + 1
        elif tagtype == VARIANT:
            if subtag in variants:
                raise LanguageTagError(
                    "The variant %r appears more than once" % subtag
                )
            variants.add(subtag)
        typename = SUBTAG_TYPES[tagtype]

        # Now restore case conventions.
        if tagtype == SCRIPT:
            subtag = subtag.title()
        elif tagtype == REGION:
            subtag = subtag.upper()
        parsed.append((typename, subtag))
        index += 1
    return parsed


def parse_extlang(subtags, start):
    """
    Parse an 'extended language' tag, which consists of 1 to 3 three-letter
    language codes. Returns the parsed extlangs and the index of the subtag
    after them.
    """
    index = start
    parsed = []
    while (index < len(subtags) and index - start < 3
           and len(subtags[index]) == 3 and _is_alpha(subtags[index])):
        parsed.append(('extlang', subtags[index]))
        index += 1
    return parsed, index


def parse_extension(subtags, start):
    """
    An extension tag consists of a 'singleton' -- a one-character subtag --
    followed by other subtags of 2 to 8 characters. It stops at the next
    singleton. Returns the extension and the index where it stopped.
    """
    subtag = subtags[start]
    boundary = start + 1
    while boundary < len(subtags) and len(subtags[boundary]) != 1:
        boundary += 1
    if boundary == start + 1:
        raise LanguageTagError(
            "The subtag %r must be followed by something" % subtag
        )
    return ('extension', '-'.join(subtags[start:boundary])), boundary


def parse_private(subtags):
    """
    Private use starts with the singleton 'x'. Everything after it is
    arbitrary codes that we can't interpret, so it consumes the rest of the
    tag.
    """
    if len(subtags) == 1:
        raise LanguageTagError(
            "The subtag %r must be followed by something" % subtags[0]
        )
    return ('private', '-'.join(subtags))


class LanguageTagError(ValueError):
    pass


def order_error(subtag, got, expected):
    """
    Output an error indicating that tags were out of order.
    """
    options = SUBTAG_TYPES[expected:]
    if len(options) == 1:
        expect_str = options[0]
    elif len(options) == 2:
        expect_str = '%s or %s' % (options[0], options[1])
    else:
        expect_str = '%s, or %s' % (', '.join(options[:-1]), options[-1])
    got_str = SUBTAG_TYPES[got]
    raise LanguageTagError("This %s subtag, %r, is out of place. "
                           "Expected %s." % (got_str, subtag, expect_str))


def subtag_error(subtag, expected='a valid subtag'):
    """
    Try to output a reasonably helpful error message based on our state of
    parsing.
    """
    raise LanguageTagError("Expected %s, got %r" % (expected, subtag))


class LanguageTag:
    """
    The result of parsing a language tag. It has the following attributes,
    any of which except *language* may be None:

    - *language*: the primary language subtag. For a grandfathered tag, this
      is the whole tag; for a tag made only of private use, it's ''.
    - *extlang*: the extended language subtags, joined with hyphens.
    - *script*: the 4-letter code for the writing system.
    - *region*: the 2-letter or 3-digit region code.
    - *variant*: the variant subtags, joined with hyphens.
    - *extension*: all extension sequences, joined with hyphens, as one
      opaque block.
    - *private*: the private use sequence, starting with 'x-'.

    Multi-valued subtags are kept as single strings because they're compared
    as a whole.
    """
    ATTRIBUTES = ['language', 'extlang', 'script', 'region', 'variant',
                  'extension', 'private']

    # The attributes that matching compares after the language, most
    # significant first
    SECONDARY_ATTRIBUTES = ATTRIBUTES[1:]

    def __init__(self, language, extlang=None, script=None, region=None,
                 variant=None, extension=None, private=None):
        self.language = language
        self.extlang = extlang
        self.script = script
        self.region = region
        self.variant = variant
        self.extension = extension
        self.private = private

    def secondary_fields(self) -> tuple:
        return tuple(getattr(self, attr) for attr in self.SECONDARY_ATTRIBUTES)

    def to_tag(self) -> str:
        """
        Convert a LanguageTag back to a language tag string, in canonical
        case. This is also the str() representation.

        >>> str(parse_tag('HE-il-u-cA-HeBrEw'))
        'he-IL-u-ca-hebrew'
        >>> LanguageTag('', private='x-dothraki').to_tag()
        'x-dothraki'
        """
        subtags = [getattr(self, attr) for attr in self.ATTRIBUTES]
        return '-'.join(subtag for subtag in subtags if subtag)

    def __eq__(self, other):
        if not isinstance(other, LanguageTag):
            return NotImplemented
        return all(getattr(self, attr) == getattr(other, attr)
                   for attr in self.ATTRIBUTES)

    def __hash__(self):
        return hash(tuple(getattr(self, attr) for attr in self.ATTRIBUTES))

    def __repr__(self):
        items = ['language={!r}'.format(self.language)]
        for attr in self.SECONDARY_ATTRIBUTES:
            if getattr(self, attr) is not None:
                items.append('{0}={1!r}'.format(attr, getattr(self, attr)))
        return "LanguageTag({})".format(', '.join(items))

    def __str__(self):
        return self.to_tag()


def parse_tag(tag: str) -> LanguageTag:
    """
    Parse a language tag string into a LanguageTag, raising LanguageTagError
    if it isn't well-formed.

    >>> parse_tag('zh-cmn-Hans-SG')
    LanguageTag(language='zh', extlang='cmn', script='Hans', region='SG')

    >>> parse_tag('EN-us')
    LanguageTag(language='en', region='US')

    >>> parse_tag('sl-rozaj-biske-1994')
    LanguageTag(language='sl', variant='rozaj-biske-1994')

    >>> parse_tag('he-IL-u-ca-hebrew-tz-jeruslm-x-private')
    LanguageTag(language='he', region='IL', extension='u-ca-hebrew-tz-jeruslm', private='x-private')

    A tag can't repeat a variant, or repeat the singleton of an extension:

    >>> parse_tag('de-1901-1901')
    Traceback (most recent call last):
        ...
    localematch.tag_parser.LanguageTagError: The variant '1901' appears more than once

    >>> parse_tag('en-a-bbb-a-ccc')
    Traceback (most recent call last):
        ...
    localematch.tag_parser.LanguageTagError: The extension 'a' appears more than once
    """
    data = {'language': ''}
    extlangs = []
    variants = []
    extensions = []
    for typ, value in parse(tag):
        if typ == 'extlang':
            extlangs.append(value)
        elif typ == 'variant':
            variants.append(value)
        elif typ == 'extension':
            extensions.append(value)
        elif typ == 'grandfathered':
            # The whole tag stands in for the language; its pieces don't
            # mean what their shapes suggest.
            data['language'] = value
        else:
            data[typ] = value

    if extlangs:
        data['extlang'] = '-'.join(extlangs)
    if variants:
        data['variant'] = '-'.join(variants)
    if extensions:
        data['extension'] = '-'.join(extensions)
    return LanguageTag(**data)
