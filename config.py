#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""Hyperparameters for both example programs."""

from dataclasses import dataclass

#-------------------------#
#   paragraph vectors     #
#-------------------------#
@dataclass(frozen=True)
class ParagraphVectorsConfig:
    labeled_resource: str = "paravec/labeled"
    unlabeled_resource: str = "paravec/unlabeled"
    learning_rate: float = 0.025
    min_learning_rate: float = 0.001
    batch_size: int = 1000 # words per training job
    epochs: int = 20
    layer_size: int = 100
    window_size: int = 5
    min_word_frequency: int = 1 # the bundled corpus is tiny, keep every word
    train_word_vectors: bool = True
    seed: int = 42

#------------#
#   iris     #
#------------#
@dataclass(frozen=True)
class IrisConfig:
    resource: str = "iris.txt"
    skip_lines: int = 0
    delimiter: str = ","
    num_inputs: int = 4
    hidden_size: int = 3
    label_index: int = 4
    num_classes: int = 3
    batch_size: int = 150 # Iris data set: 150 examples total, all loaded into one DataSet
    iterations: int = 1000
    learning_rate: float = 0.1
    l2: float = 1e-4
    seed: int = 6
    listener_freq: int = 100
    fraction_train: float = 0.65
