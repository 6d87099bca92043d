import localematch
from localematch import posix

# Pretend the program is translated into these languages, and show which
# translation a few different users would get.
#
# - The user's list of preferred locales
# - The BCP 47 locale chosen for them, or None
# - The same preferences written as POSIX locales, and the POSIX choice

AVAILABLE_TAGS = ['en-US', 'en-GB', 'pt-BR', 'pt-PT', 'ru-UA', 'zh-cmn-Hans']
AVAILABLE_POSIX = ['en_US.UTF-8', 'en_GB.UTF-8', 'pt_BR.UTF-8', 'pt_PT.UTF-8',
                   'ru_UA.UTF-8', 'zh_CN.UTF-8']

USERS = [
    (['ru-RU', 'ru', 'en-US', 'en'], ['ru_RU.UTF-8', 'ru', 'en_US.UTF-8']),
    (['pt', 'en'], ['pt', 'en']),
    (['zh-Hans'], ['zh.UTF-8']),
    (['de-CH', 'fr'], ['de_CH.UTF-8', 'fr_FR.UTF-8']),
]

for user_tags, user_posix in USERS:
    tag = localematch.best_matching_locale(AVAILABLE_TAGS, user_tags)
    posix_name = posix.best_matching_locale(AVAILABLE_POSIX, user_posix)
    print('%-30s %-12s %-40s %s' % (user_tags, tag, user_posix, posix_name))
