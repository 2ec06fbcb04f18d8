import numpy as np
import pytest
import torch

from evaluation import Evaluation


def _evaluation():
    # actual:    0 0 0 1 1 2
    # predicted: 0 0 1 1 1 0
    evaluation = Evaluation(3)
    evaluation.eval(torch.tensor([0, 0, 0, 1, 1, 2]), torch.tensor([0, 0, 1, 1, 1, 0]))
    return evaluation


def test_confusion_matrix():
    assert _evaluation().confusion_matrix().tolist() == [[2, 1, 0], [0, 2, 0], [1, 0, 0]]


def test_metrics():
    evaluation = _evaluation()
    precision = (2 / 3 + 2 / 3) / 2 # class 2 is never predicted
    recall = (2 / 3 + 1 + 0) / 3
    assert evaluation.accuracy() == pytest.approx(4 / 6)
    assert evaluation.precision() == pytest.approx(precision)
    assert evaluation.recall() == pytest.approx(recall)
    assert evaluation.f1() == pytest.approx(2 * precision * recall / (precision + recall))


def test_one_hot_labels_and_probabilities():
    evaluation = Evaluation(2)
    labels = np.array([[1, 0], [0, 1], [0, 1]])
    output = np.array([[0.9, 0.1], [0.2, 0.8], [0.6, 0.4]])
    evaluation.eval(labels, output)
    assert evaluation.confusion_matrix().tolist() == [[1, 0], [1, 1]]


def test_eval_accumulates():
    evaluation = Evaluation(2)
    evaluation.eval([0, 1], [0, 1])
    evaluation.eval([1], [0])
    assert evaluation.accuracy() == pytest.approx(2 / 3)


def test_empty_evaluation_is_zero():
    evaluation = Evaluation(3)
    assert evaluation.accuracy() == 0.0
    assert evaluation.f1() == 0.0
    assert evaluation.confusion_matrix().sum() == 0


def test_shape_mismatch_raises():
    evaluation = Evaluation(2)
    with pytest.raises(ValueError):
        evaluation.eval([0, 1, 1], [0, 1])
    with pytest.raises(ValueError):
        evaluation.eval(np.zeros((2, 3)), [0, 1])


def test_stats_text():
    stats = _evaluation().stats()
    assert "Examples labeled as 0 classified by model as 1: 1 times" in stats
    assert "Examples labeled as 2 classified by model as 2" not in stats
    assert " Accuracy:  0.6667" in stats
    assert "F1 Score:" in stats


def test_stats_uses_label_names():
    evaluation = Evaluation(2, label_names=["setosa", "virginica"])
    evaluation.eval([0, 1], [1, 1])
    assert "Examples labeled as setosa classified by model as virginica: 1 times" in evaluation.stats()


def test_precision_skips_never_predicted_class():
    evaluation = Evaluation(3)
    evaluation.eval([0, 1, 2, 2], [0, 0, 0, 0])
    assert evaluation.precision() == pytest.approx(1 / 4)
    assert evaluation.recall() == pytest.approx(1 / 3)
