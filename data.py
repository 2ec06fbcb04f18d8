#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""Tabular records (CSV) turned into a numeric DataSet."""

#-------------#
#   imports   #
#-------------#
from pathlib import Path
from typing import List, Optional, Union
import pandas as pd
import torch
import torch.nn.functional as F
from torch.utils.data import Dataset

#--------------#
#   datasets   #
#--------------#
class DataSet(Dataset):
    """Feature matrix plus one-hot label matrix, row-aligned.
    `class_names[i]` names class i when the source file used names instead of ids."""
    def __init__(self, features: torch.Tensor, labels: torch.Tensor, class_names: Optional[List[str]] = None):
        if features.size(0) != labels.size(0):
            raise ValueError(F"Features have {features.size(0)} rows but labels have {labels.size(0)}")
        self.features = features
        self.labels = labels
        self.class_names = class_names

    def __len__(self):
        return self.features.size(0)

    def __getitem__(self, idx):
        return self.features[idx], self.labels[idx]

    def normalize_zero_mean_unit_variance(self) -> "DataSet":
        """Standardizes every feature column in place. Constant columns are only centred."""
        mean = self.features.mean(dim=0)
        std = self.features.std(dim=0)
        std = torch.where(std == 0, torch.ones_like(std), std)
        self.features = (self.features - mean) / std
        return self

    def shuffle(self, seed: Optional[int] = None) -> "DataSet":
        generator = torch.Generator()
        if seed is not None:
            generator.manual_seed(seed)
        else:
            generator.seed()
        perm = torch.randperm(len(self), generator=generator)
        self.features = self.features[perm]
        self.labels = self.labels[perm]
        return self

    def split_test_and_train(self, fraction_train: float) -> tuple["DataSet", "DataSet"]:
        """First int(fraction_train * n) rows train, the rest test.
        Returns: train, test"""
        if not 0 < fraction_train < 1:
            raise ValueError(F"fraction_train must be in (0, 1), got {fraction_train}")
        n_train = int(fraction_train * len(self))
        if n_train == 0 or n_train == len(self):
            raise ValueError(F"Splitting {len(self)} examples at {fraction_train} leaves an empty part")
        train = DataSet(self.features[:n_train], self.labels[:n_train], self.class_names)
        test = DataSet(self.features[n_train:], self.labels[n_train:], self.class_names)
        return train, test

#-------------#
#   reading   #
#-------------#
def read_csv_dataset(path: Union[str, Path], label_index: int = 4, num_classes: int = 3,
                     skip_lines: int = 0, delimiter: str = ",") -> DataSet:
    """Reads a headerless CSV whose `label_index` column holds the class.
    The class column may hold integer ids in [0, num_classes) or names; names are
    numbered in sorted order."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(F"CSV file not found: {path}")
    try:
        frame: pd.DataFrame = pd.read_csv(path, header=None, sep=delimiter, skiprows=skip_lines,
                                          skip_blank_lines=True, dtype=str)
    except pd.errors.ParserError as err: # ragged rows
        raise ValueError(F"Malformed CSV {path}: {err}") from err

    expected = label_index + 1
    if frame.shape[1] != expected:
        raise ValueError(F"Expected {expected} columns in {path}, found {frame.shape[1]}")
    ragged = frame.isna().any(axis=1)
    if ragged.any():
        raise ValueError(F"Row {int(ragged.idxmax()) + skip_lines + 1} of {path} is missing values")

    feature_columns = [c for c in frame.columns if c != label_index]
    try:
        features = frame[feature_columns].apply(lambda col: pd.to_numeric(col.str.strip()))
    except ValueError as err:
        raise ValueError(F"Non-numeric feature in {path}: {err}") from err

    classes, class_names = to_class_ids(frame[label_index].str.strip(), num_classes)
    x = torch.tensor(features.to_numpy(), dtype=torch.float32)
    y = F.one_hot(torch.tensor(classes, dtype=torch.long), num_classes=num_classes).float()
    return DataSet(x, y, class_names)

def to_class_ids(column: pd.Series, num_classes: int) -> tuple[list[int], Optional[List[str]]]:
    """Returns: class ids, class names (None when the column already held ids)"""
    numeric = pd.to_numeric(column, errors="coerce")
    if not numeric.isna().any():
        if (numeric % 1 != 0).any():
            raise ValueError("Class ids must be integers")
        ids = numeric.astype(int)
        out_of_range = ids[(ids < 0) | (ids >= num_classes)]
        if len(out_of_range):
            raise ValueError(F"Class id {out_of_range.iloc[0]} outside [0, {num_classes})")
        return ids.tolist(), None

    names = sorted(column.unique())
    if len(names) > num_classes:
        raise ValueError(F"Found {len(names)} classes {names}, expected at most {num_classes}")
    index = {name: i for i, name in enumerate(names)}
    class_names = names + [str(i) for i in range(len(names), num_classes)] # unseen classes keep their id
    return [index[name] for name in column], class_names
