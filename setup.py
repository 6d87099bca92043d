from setuptools import setup


LONG_DESC = """
localematch picks the best locale a program supports for a user, given the
user's own list of preferred locales. It works with BCP 47 language tags,
such as 'en-US' or 'zh-Hant-TW', and with POSIX locale names, such as
'en_US.UTF-8'.

Matching is deliberately simple: a locale can only match one with the same
language, and the rest of its subtags break ties, more significant ones
first. The locale you get back is always one of the ones you passed in,
exactly as you wrote it.
"""


setup(
    name="localematch",
    version='0.2.4',
    license="LGPL-3.0-or-later",
    platforms=["any"],
    description="Selects the best available locale for a user's preferred locales",
    long_description=LONG_DESC,
    packages=['localematch'],
    include_package_data=True,
    install_requires=[],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Internationalization",
        "Topic :: Software Development :: Localization",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
