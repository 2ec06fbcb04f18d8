#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""Centroid building and label scoring on top of trained paragraph vectors."""

from typing import Callable, List, Tuple

import numpy as np

from paravec_data import LabelledDocument, tokenize

class MeansBuilder:
    """Turns a document into the mean of its word vectors.

    `word_vectors` is anything supporting `token in word_vectors` and
    `word_vectors[token]`, e.g. gensim's KeyedVectors (`model.wv`)."""
    def __init__(self, word_vectors, tokenizer: Callable[[str], List[str]] = tokenize):
        self.word_vectors = word_vectors
        self.tokenizer = tokenizer

    def document_as_vector(self, document: LabelledDocument) -> np.ndarray:
        tokens = [token for token in self.tokenizer(document.content) if token in self.word_vectors]
        if not tokens:
            raise ValueError(F"Document '{document.label}' has no tokens in the model vocabulary")
        vectors = np.stack([np.asarray(self.word_vectors[token], dtype=np.float64) for token in tokens])
        return vectors.mean(axis=0)

class LabelSeeker:
    """Scores a centroid against the vector of every known label."""
    def __init__(self, labels: List[str], lookup_table):
        if not labels:
            raise ValueError("LabelSeeker requires at least one label")
        self.labels = list(labels)
        self.lookup_table = lookup_table

    def get_scores(self, vector: np.ndarray) -> List[Tuple[str, float]]:
        scores = []
        for label in self.labels:
            if label not in self.lookup_table:
                raise ValueError(F"Label '{label}' has no known vector!")
            scores.append((label, cosine_similarity(vector, self.lookup_table[label])))
        return scores

def cosine_similarity(a, b) -> float:
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    norm = np.linalg.norm(a) * np.linalg.norm(b)
    if norm == 0:
        return 0.0
    return float(np.dot(a, b) / norm)
