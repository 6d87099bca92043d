"""
The scoring and selection step shared by the BCP 47 and POSIX matchers.

Both grammars boil a locale down to a language plus a tuple of secondary
fields, most significant first. Any parsed object with a `language`
attribute and a `secondary_fields()` method can be matched here.

This is not meant to be used directly; the grammar modules call it with
their own field weights.
"""
import logging
import string

logger = logging.getLogger(__name__)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def as_text(value) -> str:
    """
    Get the text of a locale identifier that may not be a str.

    Bytes are decoded as Latin-1, which maps every byte to one character,
    so non-ASCII bytes stay distinct and never fold together. Anything else
    isn't a locale name at all, and raises TypeError; in particular, None
    must not turn into the text 'None'.

    >>> as_text('en-US')
    'en-US'
    >>> as_text(b'ru_RU.UTF-8')
    'ru_RU.UTF-8'
    >>> as_text(None)
    Traceback (most recent call last):
        ...
    TypeError: A locale must be a str or bytes, not NoneType
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('latin-1')
    raise TypeError(
        "A locale must be a str or bytes, not %s" % type(value).__name__
    )


def same_text(left: str, right: str) -> bool:
    """
    Compare two strings, ignoring the case of ASCII letters only.

    >>> same_text('UTF-8', 'utf-8')
    True
    >>> same_text('ЖЯ', 'жя')
    False
    """
    return left.translate(_ASCII_LOWER) == right.translate(_ASCII_LOWER)


def score(candidate, preference, weights) -> int:
    """
    Add up the weights of the secondary fields where `candidate` and
    `preference` agree.

    A field that is missing (None) on either side has no opinion: it adds
    nothing, and it doesn't count against the candidate either. An empty
    string is a value like any other.
    """
    total = 0
    for cand_value, pref_value, weight in zip(
        candidate.secondary_fields(), preference.secondary_fields(), weights
    ):
        if cand_value is None or pref_value is None:
            continue
        if same_text(cand_value, pref_value):
            total += weight
    return total


def select(candidates, preference, weights):
    """
    Return the index of the candidate that best matches `preference`, or
    None if no candidate has the same language.

    When several candidates share the best score, the one that comes first
    wins. We scan forward and only replace the best candidate on a strictly
    higher score.
    """
    best_index = None
    best_score = -1
    for index, candidate in enumerate(candidates):
        if not same_text(candidate.language, preference.language):
            continue
        candidate_score = score(candidate, preference, weights)
        if candidate_score > best_score:
            best_index = index
            best_score = candidate_score

    if best_index is not None:
        logger.debug("Candidate %d scored %d, the best of its language",
                     best_index, best_score)
    return best_index


def best_candidate(candidates, preferences, weights):
    """
    Try each of the `preferences` in order, and return the index of the
    best candidate for the first one that has any candidate in its language.
    Return None if none of them do.

    `preferences` is only iterated as far as it needs to be.
    """
    for preference in preferences:
        index = select(candidates, preference, weights)
        if index is not None:
            return index
    return None
