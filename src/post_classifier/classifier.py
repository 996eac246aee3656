"""Bernoulli Naive Bayes topic classifier for short posts.

Learns which words go with which topic tags from a labeled training set
and predicts the tag of new posts. Pure Python, no numpy or sklearn.

The model counts *documents*, not tokens: a word contributes at most once
per post. Scoring uses a fixed back-off scheme rather than additive
smoothing:

- a word never seen in training costs ``log(1 / N)``
- a word seen in training but never with the label costs
  ``log(df(word) / N)``
- otherwise the word contributes ``log(df(label, word) / df(label))``

where ``N`` is the number of training posts.
"""

from __future__ import annotations

import logging
import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import DegenerateModelError, UnknownLabelError
from .models import Document, EvaluationResult, Prediction, PredictionRecord
from .preprocessing import unique_words

logger = logging.getLogger(__name__)


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Model:
    """Trained document-frequency statistics plus the scoring rules.

    Instances are produced by :func:`train` and never change afterwards;
    all mappings are read-only views, so a model can be shared freely
    between callers.

    Attributes:
        total_documents: Number of training posts.
        label_document_count: Label -> number of posts with that label.
        word_document_count: Word -> number of posts containing the word.
        joint_count: Label -> word -> number of posts with that label
            containing the word.
    """

    total_documents: int = 0
    label_document_count: Mapping[str, int] = field(default_factory=_empty_mapping)
    word_document_count: Mapping[str, int] = field(default_factory=_empty_mapping)
    joint_count: Mapping[str, Mapping[str, int]] = field(default_factory=_empty_mapping)

    @property
    def vocabulary_size(self) -> int:
        """Number of distinct words across all training posts."""
        return len(self.word_document_count)

    @property
    def labels(self) -> list[str]:
        """Labels that can be predicted, in lexicographic order.

        A label only becomes scoreable once one of its posts contained at
        least one word.
        """
        return sorted(self.joint_count)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def log_prior(self, label: str) -> float:
        """Log of the fraction of training posts carrying ``label``.

        Raises:
            DegenerateModelError: If the model was trained on no posts.
            UnknownLabelError: If ``label`` never appeared in training.
        """
        self._check_label(label)
        return math.log(self.label_document_count[label] / self.total_documents)

    def log_likelihood(self, label: str, word: str) -> float:
        """Log-probability of ``word`` appearing in a post with ``label``.

        The out-of-vocabulary case is checked first, so a word that was
        never seen anywhere gets the flat ``log(1 / N)`` penalty rather
        than the label back-off.

        Raises:
            DegenerateModelError: If the model was trained on no posts.
            UnknownLabelError: If ``label`` never appeared in training.
        """
        self._check_label(label)

        word_count = self.word_document_count.get(word, 0)
        if word_count == 0:
            return math.log(1 / self.total_documents)

        joint = self.joint_count.get(label, {}).get(word, 0)
        if joint == 0:
            return math.log(word_count / self.total_documents)

        return math.log(joint / self.label_document_count[label])

    def score(self, label: str, content: str) -> float:
        """Unnormalized log-posterior of ``label`` for a post's text."""
        return self._score_words(label, unique_words(content))

    def predict(self, content: str) -> Prediction:
        """Return the highest-scoring label for ``content`` and its score.

        Labels are visited in lexicographic order and only a strictly
        greater score replaces the current best, so ties go to the label
        that sorts first.

        Raises:
            DegenerateModelError: If there are no scoreable labels.
        """
        labels = self.labels
        if not labels:
            raise DegenerateModelError(
                "Model has no scoreable labels. Train on at least one non-empty post."
            )

        words = unique_words(content)
        best_label = labels[0]
        best_score = self._score_words(best_label, words)
        for label in labels[1:]:
            label_score = self._score_words(label, words)
            if label_score > best_score:
                best_label, best_score = label, label_score

        return Prediction(best_label, best_score)

    def parameters(self) -> Iterator[tuple[str, str, int, float]]:
        """Yield ``(label, word, count, log_likelihood)`` for every observed pair.

        Labels and words come out in lexicographic order.
        """
        for label in self.labels:
            words = self.joint_count[label]
            for word in sorted(words):
                yield label, word, words[word], self.log_likelihood(label, word)

    def _score_words(self, label: str, words: Iterable[str]) -> float:
        total = self.log_prior(label)
        for word in words:
            total += self.log_likelihood(label, word)
        return total

    def _check_label(self, label: str) -> None:
        if self.total_documents == 0:
            raise DegenerateModelError(
                "Model was trained on an empty set of posts; scores are undefined."
            )
        if label not in self.label_document_count:
            raise UnknownLabelError(
                f"Unknown label: {label!r}. Known: {sorted(self.label_document_count)}"
            )


# ---------------------------------------------------------------------------
# Training
# ---------------------------------------------------------------------------

def train(documents: Iterable[Document]) -> Model:
    """Count label, word, and label/word document frequencies.

    Args:
        documents: Labeled training posts, consumed in a single pass.

    Returns:
        A frozen :class:`Model`. An empty input yields an empty model whose
        scoring methods raise :class:`DegenerateModelError`.
    """
    total = 0
    label_counts: Counter[str] = Counter()
    word_counts: Counter[str] = Counter()
    joint_counts: dict[str, Counter[str]] = defaultdict(Counter)

    for doc in documents:
        label_counts[doc.label] += 1
        for word in unique_words(doc.content):
            word_counts[word] += 1
            joint_counts[doc.label][word] += 1
        total += 1

    if total == 0:
        logger.warning("Training set is empty; the model cannot score posts")
    else:
        logger.debug(
            "Trained on %d posts: %d labels, vocabulary size %d",
            total, len(label_counts), len(word_counts),
        )

    return Model(
        total_documents=total,
        label_document_count=MappingProxyType(dict(label_counts)),
        word_document_count=MappingProxyType(dict(word_counts)),
        joint_count=MappingProxyType({
            label: MappingProxyType(dict(counts))
            for label, counts in joint_counts.items()
        }),
    )


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def evaluate(model: Model, documents: Iterable[Document]) -> EvaluationResult:
    """Predict every test post and count matches with its own label.

    Args:
        model: A trained model.
        documents: Labeled test posts.

    Returns:
        EvaluationResult with the ``correct``/``total`` tally and one
        record per test post, in input order.
    """
    result = EvaluationResult()
    for doc in documents:
        prediction = model.predict(doc.content)
        record = PredictionRecord(
            gold_label=doc.label,
            predicted_label=prediction.label,
            score=prediction.score,
            content=doc.content,
        )
        result.records.append(record)
        if record.is_correct:
            result.correct += 1
        result.total += 1

    logger.debug("Evaluated %d posts, %d correct", result.total, result.correct)
    return result
