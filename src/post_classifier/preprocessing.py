"""Tokenization for the presence (Bernoulli) word model.

Tokens are whatever whitespace splitting yields: no lowercasing, no
punctuation stripping, no stopwords. Only the presence of a word in a
post matters, so the tokenizer returns a set.
"""

from __future__ import annotations


def unique_words(content: str) -> frozenset[str]:
    """Return the distinct whitespace-delimited tokens in ``content``.

    Runs of any whitespace (spaces, tabs, newlines) separate tokens and
    empty tokens are discarded.

    Example::

        >>> sorted(unique_words("to be or  not to be"))
        ['be', 'not', 'or', 'to']
    """
    return frozenset(content.split())
