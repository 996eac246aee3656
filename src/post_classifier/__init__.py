"""Post Classifier -- learn topic tags for forum posts with Naive Bayes."""

__version__ = "0.1.0"

from .classifier import Model, evaluate, train
from .errors import (
    ClassifierError,
    DegenerateModelError,
    InputAccessError,
    MalformedRecordError,
    UnknownLabelError,
)
from .models import Document, EvaluationResult, Prediction, PredictionRecord
from .parsers import read_documents
from .preprocessing import unique_words

__all__ = [
    # Core
    "Model",
    "train",
    "evaluate",
    "unique_words",
    # Data
    "Document",
    "Prediction",
    "PredictionRecord",
    "EvaluationResult",
    "read_documents",
    # Errors
    "ClassifierError",
    "DegenerateModelError",
    "InputAccessError",
    "MalformedRecordError",
    "UnknownLabelError",
]
