"""Shared test fixtures for post-classifier tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from post_classifier.classifier import Model, train
from post_classifier.models import Document


@pytest.fixture
def tiny_docs() -> list[Document]:
    """Three-post corpus with hand-checkable counts."""
    return [
        Document("A", "x y"),
        Document("A", "x"),
        Document("B", "y z"),
    ]


@pytest.fixture
def tiny_model(tiny_docs: list[Document]) -> Model:
    return train(tiny_docs)


@pytest.fixture
def forum_docs() -> list[Document]:
    """Small corpus of course-forum posts with distinctive vocabulary."""
    return [
        Document("euchre", "how do I lead with the trump card in euchre"),
        Document("euchre", "my euchre player makes trump wrong on the upcard"),
        Document("euchre", "dealer should pick up the upcard and discard"),
        Document("recursion", "base case missing in my recursive list function"),
        Document("recursion", "tail recursive helper for the list sum"),
        Document("recursion", "stack overflow from recursive tree traversal"),
        Document("calculator", "stack of doubles for the rpn calculator"),
        Document("calculator", "calculator pops two operands from the stack"),
    ]


def _write_csv(path: Path, rows: list[tuple[str, str]], header: str = "tag,content") -> Path:
    lines = [header] + [f'{label},"{content}"' for label, content in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def train_csv(tmp_path: Path) -> Path:
    return _write_csv(tmp_path / "train.csv", [
        ("A", "x y"),
        ("A", "x"),
        ("B", "y z"),
    ])


@pytest.fixture
def test_csv(tmp_path: Path) -> Path:
    return _write_csv(tmp_path / "test.csv", [
        ("A", "x"),
        ("B", "z"),
        ("B", "x z"),
    ])


@pytest.fixture
def write_csv(tmp_path: Path):
    """Factory for writing ad-hoc CSV files under ``tmp_path``."""

    def _factory(name: str, rows: list[tuple[str, str]], header: str = "tag,content") -> Path:
        return _write_csv(tmp_path / name, rows, header)

    return _factory
