"""
Tests for choosing among BCP 47 language tags.
"""
import logging

import pytest

from localematch.bcp47 import best_matching_locale


CASES = [
    # One best match
    (['en-US', 'ru-RU'], ['ru', 'en'], 'ru-RU'),
    (['en-US', 'ru-RU'], ['en', 'ru'], 'en-US'),
    (['en-US', 'en-GB', 'ru-UA', 'fr-FR', 'it'], ['ru-RU', 'ru', 'en-US', 'en'], 'ru-UA'),
    (['ru-RU', 'sq-AL', 'eu-ES'], ['en-US', 'en', 'sq-XK', 'sq'], 'sq-AL'),
    (['lv-LV', 'ru-RU', 'lt-LT', 'mn-MN', 'ku-TR'], ['fr', 'fr-FR', 'ml', 'si', 'id', 'ku-IQ'], 'ku-TR'),
    (['st-LS', 'sn-ZW', 'en-US'], ['zu-ZA', 'st-ZA', 'en'], 'st-LS'),

    # Several equally good matches
    (['en-US', 'en-GB', 'ru-UA', 'fr-FR', 'it'], ['en-US', 'en', 'ru-RU', 'ru'], 'en-US'),
    (['en', 'pt-BR', 'pt-PT', 'es'], ['pt', 'en'], 'pt-BR'),
    (['ku-TR', 'ku-IQ', 'ku-IR'], ['ku', 'en'], 'ku-TR'),
    (['en-US', 'ru-RU', 'mn-CN', 'sn-ZW', 'en', 'ru', 'mn-MN', 'sn'], ['mn', 'ru', 'en', 'sn'], 'mn-CN'),

    # Identical lists
    (['en'], ['en'], 'en'),
    (['en-US'], ['en-US'], 'en-US'),
    (['en-US', 'ru-RU'], ['en-US', 'ru-RU'], 'en-US'),
    (['st-LS', 'sn-ZW', 'en-US'], ['st-LS', 'sn-ZW', 'en-US'], 'st-LS'),
    (['ku-TR', 'ku-IQ', 'ku-IR'], ['ku-TR', 'ku-IQ', 'ku-IR'], 'ku-TR'),

    # One available locale, or one user locale
    (['kk'], ['en', 'en-US', 'fr-FR', 'fr', 'it', 'pt', 'ru-RU', 'es-ES', 'kk-KZ'], 'kk'),
    (['en', 'en-US', 'fr-FR', 'fr', 'it', 'pt', 'ru-RU', 'es-ES', 'kk-KZ', 'pt'], ['pt-PT'], 'pt'),

    # No language in common
    (['en', 'en-US', 'fr-FR', 'fr', 'it', 'pt', 'es-ES', 'kk-KZ', 'pt'], ['ru'], None),
    (['en', 'en-US', 'fr-FR', 'fr', 'pt'], ['id'], None),
    (['ru', 'be', 'uk', 'kk'], ['en'], None),

    # Empty lists
    ([], ['en', 'fr', 'it', 'pt'], None),
    (['en', 'fr', 'it', 'pt'], [], None),
    ([], [], None),

    # More subtags
    (['zh', 'zh-cmn', 'zh-cmn-Hans'], ['zh-cmn-SG'], 'zh-cmn'),
    (['zh', 'zh-cmn', 'zh-cmn-Hans', 'zh-cmn-Hans-SG'], ['zh-cmn-SG'], 'zh-cmn-Hans-SG'),
    (['zh', 'zh-cmn', 'zh-cmn-Hans-SG'], ['zh-Hans'], 'zh-cmn-Hans-SG'),
    (['zh', 'zh-cmn', 'zh-cmn-Hans', 'zh-cmn-Hans-SG'], ['zh-Hans'], 'zh-cmn-Hans'),
    (['zh', 'zh-cmn', 'zh-cmn-Hans', 'zh-cmn-Hans-SG'], ['zh-SG'], 'zh-cmn-Hans-SG'),
    (['zh', 'zh-cmn', 'zh-cmn-Hans'], ['zh-Hans'], 'zh-cmn-Hans'),
    (['de', 'de-1901', 'de-CH-1901'], ['de-CH-1996'], 'de-CH-1901'),
    (['sl', 'sl-rozaj', 'sl-rozaj-biske'], ['sl-rozaj-biske'], 'sl-rozaj-biske'),

    # Extensions are compared as one block
    (['zh', 'he'], ['he-IL-u-ca-hebrew-tz-jeruslm', 'zh'], 'he'),
    (['zh', 'he-IL-u-ca-hebrew-tz-jeruslm-nu-latn'], ['he', 'zh'], 'he-IL-u-ca-hebrew-tz-jeruslm-nu-latn'),
    (['ar-u-nu-latn', 'ar'], ['ar-u-no-latn', 'ar', 'en-US', 'en'], 'ar-u-nu-latn'),
    (['fr-FR-u-em-text', 'gsw-u-em-emoji'], ['gsw-u-em-text'], 'gsw-u-em-emoji'),
    (['ar', 'ar-u-nu-arab', 'ar-u-nu-latn'], ['ar-u-nu-latn'], 'ar-u-nu-latn'),

    # Private use
    (['en', 'en-x-pirate', 'en-x-lolcat'], ['en-x-lolcat'], 'en-x-lolcat'),
    (['x-klingon', 'x-dothraki'], ['x-dothraki'], 'x-dothraki'),

    # Malformed tags are ignored
    (['en-US-SUS-BUS-VUS-GUS'], ['en'], None),
    (['en-abcdefghijklmnopqrstuvwxyz'], ['en'], None),
    (['ru-ЖЖЯЯ'], ['ru'], None),
    (['ru--'], ['ru'], None),
    ([' en'], ['en'], None),
    (['en_US'], ['en'], None),
    (['', '@', '!!!', '721345'], ['en', '', '@', '!!!', '721345'], None),

    # Repeated entries
    (['en', 'en', 'en', 'en'], ['ru-RU', 'ru', 'en-US', 'en'], 'en'),
    (['en-US', 'en-GB', 'ru-UA', 'fr-FR', 'it'], ['kk', 'ru', 'pt', 'ru'], 'ru-UA'),

    # Littered with garbage
    (['!!!!!!', 'qwydgn12i6i', 'ЖЖяяЖяЬЬЬ', 'en-US', '!*&^^&*', 'qweqweqweqwe-qweqwe', 'ru-RU', '@@', '@'], ['ru', 'en'], 'ru-RU'),
    (['', '', '', 'zh', '', '', '', '', '', 'he', '', ''], ['he-IL-u-ca-hebrew-tz-jeruslm', '', '', 'zh'], 'he'),
    (['bla-!@#', '12345', 'en-US', 'en-GB', 'ru-UA', 'fr-FR', 'it'], ['bla-!@#', '12345', 'en-US', 'en', 'ru-RU', 'ru'], 'en-US'),

    # Control characters
    (['\0', '\x01', '\x02'], ['\0', '\x01', '\x02'], None),
    (['en\0'], ['en\0', 'en-US', 'en'], None),
    (['sq\0', 'ru-RU', 'sq-AL', 'eu-ES'], ['en-US', 'en', 'sq-XK', 'sq'], 'sq-AL'),
    (['en-US', 'ru-RU\x03'], ['ru', 'en'], 'en-US'),
    (['\0', '\x01\x02\x03\x04', 'sq\0', 'ru-RU', 'sq-AL', 'eu-ES'], ['en-US', '\x06', 'en', 'sq-XK', 'sq', '\0'], 'sq-AL'),
    (['en-US', 'ru-RU\x03', '\x09\x09\x09\x09\x09', '\x0a\x09\x08\x07\x01\x00'], ['\x01', '\x02', '\x03', '\x04', 'ru', 'en'], 'en-US'),

    # Letter case is ignored, and kept in the result
    (['EN'], ['en'], 'EN'),
    (['En'], ['EN'], 'En'),
    (['Ru-rU'], ['en', 'ru'], 'Ru-rU'),
    (['rU-rU'], ['en', 'Ru'], 'rU-rU'),
    (['zh', 'zh-cmn', 'zH-cMn-hANS-Sg'], ['zh-Hans'], 'zH-cMn-hANS-Sg'),
    (['zh', 'zh-cmn', 'zH-cMn-hANS-Sg'], ['ZH-HANS'], 'zH-cMn-hANS-Sg'),
    (['zh', 'he-IL-u-ca-HEBREW-tz-Jeruslm-nu-LaTn'], ['he', 'zh'], 'he-IL-u-ca-HEBREW-tz-Jeruslm-nu-LaTn'),
    (['zh', 'HE-il-u-cA-HeBrEw-tz-Jeruslm-nu-LaTN'], ['he', 'zh'], 'HE-il-u-cA-HeBrEw-tz-Jeruslm-nu-LaTN'),
    (['ar-U-NU-LATN', 'ar-u-nu-arab'], ['ar-u-nu-arab'], 'ar-u-nu-arab'),
]


@pytest.mark.parametrize('available, user, expected', CASES)
def test_best_matching_locale(available, user, expected):
    assert best_matching_locale(available, user) == expected


def test_result_is_the_given_object():
    # Build the strings at runtime so they aren't shared constants
    available = [''.join(['en', '-', 'US']), ''.join(['ru', '-', 'RU'])]
    result = best_matching_locale(available, ['ru'])
    assert result is available[1]


def test_accepts_any_iterables():
    available = (locale for locale in ['en-US', 'ru-RU'])
    user = iter(('ru', 'en'))
    assert best_matching_locale(available, user) == 'ru-RU'


def test_user_locales_consumed_lazily():
    user = iter(['fr', 'ru', 'en', 'de'])
    assert best_matching_locale(['en-US', 'ru-RU'], user) == 'ru-RU'
    assert next(user) == 'en'


def test_malformed_user_locale_does_not_stop_matching():
    assert best_matching_locale(['en-GB', 'fr-FR'], ['fr_FR', 'fr-CA']) == 'fr-FR'


def test_bytes_locales():
    result = best_matching_locale([b'en-US', b'ru-RU'], [b'ru'])
    assert result == b'ru-RU'


def test_str_subclass_is_returned_unchanged():
    class Locale(str):
        pass

    available = [Locale('en-US'), Locale('pt-BR')]
    result = best_matching_locale(available, ['pt'])
    assert type(result) is Locale
    assert result is available[1]


def test_language_must_match():
    # Everything but the language agrees
    available = ['de-Latn-US-u-ca-gregory-x-test']
    assert best_matching_locale(available, ['en-Latn-US-u-ca-gregory-x-test']) is None


def test_order_breaks_ties():
    assert best_matching_locale(['pt-BR', 'pt-PT'], ['pt']) == 'pt-BR'
    assert best_matching_locale(['pt-PT', 'pt-BR'], ['pt']) == 'pt-PT'


def test_identical_lists_give_the_first_locale():
    locales = ['sr-Latn-RS', 'sr-Cyrl-RS', 'hr', 'bs']
    assert best_matching_locale(locales, locales) == 'sr-Latn-RS'


def test_later_preferences_when_first_has_no_language():
    assert best_matching_locale(['de', 'fr'], ['ja', 'fr-CA']) == 'fr'
    assert best_matching_locale(['de', 'fr'], ['ja', 'ko']) is None


def test_malformed_locales_are_logged(caplog):
    caplog.set_level(logging.DEBUG, logger='localematch.bcp47')
    assert best_matching_locale(['en-US', 'ru--'], ['ru', 'en']) == 'en-US'
    assert "Ignoring malformed locale 'ru--'" in caplog.text


def test_locales_that_are_not_text_are_ignored():
    # None must not be read as the text 'None', which is a well-formed tag
    assert best_matching_locale([None, 'en'], ['none', 'en']) == 'en'
    assert best_matching_locale(['en-US'], [None, 1, 'en']) == 'en-US'
    assert best_matching_locale([None], [None]) is None


def test_very_long_tags_are_dropped():
    # Tags with thousands of subtags are malformed, and parse without
    # running out of stack
    repeated_variant = 'en-' + '-'.join(['1901'] * 1500)
    repeated_extension = 'en-' + '-'.join(['a-bb'] * 1500)
    available = [repeated_variant, repeated_extension, 'en-US']
    assert best_matching_locale(available, [repeated_extension, 'en']) == 'en-US'
