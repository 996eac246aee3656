"""Exception hierarchy for post classification.

Every error also derives from the closest builtin exception, so code that
already catches ``OSError`` or ``ValueError`` around file handling keeps
working.
"""

from __future__ import annotations


class ClassifierError(Exception):
    """Base class for all post-classifier errors."""


class InputAccessError(ClassifierError, OSError):
    """An input file cannot be opened for reading."""


class MalformedRecordError(ClassifierError, ValueError):
    """A CSV record is missing the label or content field."""


class UnknownLabelError(ClassifierError, KeyError):
    """A label was queried that never appeared in the training data."""

    def __str__(self) -> str:
        # KeyError reprs its argument; show the message as written.
        return str(self.args[0]) if self.args else ""


class DegenerateModelError(ClassifierError, ValueError):
    """The model has no training documents (or no scoreable labels)."""
