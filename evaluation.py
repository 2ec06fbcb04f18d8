#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""Classification statistics accumulated over one or more batches."""

from typing import List, Optional

import numpy as np
import torch
from sklearn.metrics import accuracy_score, confusion_matrix, precision_score, recall_score

class Evaluation:
    def __init__(self, num_classes: int, label_names: Optional[List[str]] = None):
        if label_names is not None and len(label_names) != num_classes:
            raise ValueError(F"Got {len(label_names)} label names for {num_classes} classes")
        self.num_classes = num_classes
        self.label_names = label_names
        self.actual: List[int] = []
        self.predicted: List[int] = []

    def eval(self, labels, output) -> None:
        """labels: one-hot rows or class ids. output: per-class scores or class ids."""
        actual = self._to_class_ids(labels)
        predicted = self._to_class_ids(output)
        if actual.shape != predicted.shape:
            raise ValueError(F"Labels describe {actual.shape[0]} examples but output describes {predicted.shape[0]}")
        self.actual.extend(actual.tolist())
        self.predicted.extend(predicted.tolist())

    def _to_class_ids(self, values) -> np.ndarray:
        if isinstance(values, torch.Tensor):
            values = values.detach().cpu().numpy()
        values = np.asarray(values)
        if values.ndim == 2:
            if values.shape[1] != self.num_classes:
                raise ValueError(F"Expected {self.num_classes} columns, got {values.shape[1]}")
            return values.argmax(axis=1)
        if values.ndim == 1:
            return values.astype(int)
        raise ValueError(F"Expected a 1-d or 2-d array, got {values.ndim} dimensions")

    #-------------#
    #   metrics   #
    #-------------#
    @property
    def _classes(self):
        return list(range(self.num_classes))

    def confusion_matrix(self) -> np.ndarray:
        """Rows are actual classes, columns predicted classes."""
        if not self.actual:
            return np.zeros((self.num_classes, self.num_classes), dtype=int)
        return confusion_matrix(self.actual, self.predicted, labels=self._classes)

    def accuracy(self) -> float:
        if not self.actual:
            return 0.0
        return float(accuracy_score(self.actual, self.predicted))

    def precision(self) -> float:
        """Macro average over the classes the model predicted at least once;
        classes never predicted have no defined precision and are skipped."""
        if not self.actual:
            return 0.0
        predicted_classes = sorted(set(self.predicted))
        return float(precision_score(self.actual, self.predicted, labels=predicted_classes, average="macro", zero_division=0))

    def recall(self) -> float:
        """Macro average over the classes present in the labels."""
        if not self.actual:
            return 0.0
        actual_classes = sorted(set(self.actual))
        return float(recall_score(self.actual, self.predicted, labels=actual_classes, average="macro", zero_division=0))

    def f1(self) -> float:
        precision, recall = self.precision(), self.recall()
        if precision + recall == 0:
            return 0.0
        return 2 * precision * recall / (precision + recall)

    def _name(self, idx: int) -> str:
        return self.label_names[idx] if self.label_names else str(idx)

    def stats(self) -> str:
        lines = []
        matrix = self.confusion_matrix()
        for actual in range(self.num_classes):
            for predicted in range(self.num_classes):
                count = matrix[actual, predicted]
                if count:
                    lines.append(F"Examples labeled as {self._name(actual)} classified by model as {self._name(predicted)}: {count} times")
        lines.append("")
        lines.append("==========================Scores========================================")
        lines.append(F" Accuracy:  {self.accuracy():.4f}")
        lines.append(F" Precision: {self.precision():.4f}")
        lines.append(F" Recall:    {self.recall():.4f}")
        lines.append(F" F1 Score:  {self.f1():.4f}")
        lines.append("========================================================================")
        return "\n".join(lines)
