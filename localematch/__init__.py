"""
localematch picks the best locale your program supports for a user who has
listed the locales they prefer.

It understands two ways of writing locales:

- BCP 47 language tags, such as 'en-US' or 'zh-cmn-Hans-SG', in
  `localematch.bcp47`
- POSIX locale names, such as 'en_US.UTF-8' or 'de_DE@euro', in
  `localematch.posix`

Each module has a `best_matching_locale(available_locales, user_locales)`
function. The one available at the top level is the BCP 47 version.

>>> best_matching_locale(['en-US', 'ru-BY'], ['ru-RU', 'ru', 'en-US', 'en'])
'ru-BY'

>>> posix.best_matching_locale(['en_US.UTF-8', 'ru_BY.UTF-8'],
...                            ['ru_RU.UTF-8', 'ru', 'en_US.UTF-8', 'en'])
'ru_BY.UTF-8'
"""
from . import bcp47, posix
from .bcp47 import best_matching_locale
from .posix import PosixLocale
from .tag_parser import LanguageTag, LanguageTagError, parse_tag

__all__ = [
    'bcp47', 'posix', 'best_matching_locale', 'PosixLocale', 'LanguageTag',
    'LanguageTagError', 'parse_tag',
]
