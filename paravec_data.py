#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""Labelled document collections for the paragraph vectors example.

A source folder holds one subfolder per label; every file inside a subfolder
is a document carrying that label:

    paravec/labeled/finance/01.txt
    paravec/labeled/health/01.txt
"""

# generic imports
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

#---------------#
#   documents   #
#---------------#
@dataclass(frozen=True)
class LabelledDocument:
    label: str
    content: str
    name: str = "" # source file name

    @property
    def title(self) -> str:
        """label/name, unique within one source folder."""
        return F"{self.label}/{self.name}" if self.name else self.label

class LabelsSource:
    """Ordered collection of the distinct labels an iterator has seen."""
    def __init__(self, labels: Optional[List[str]] = None):
        self._labels: List[str] = []
        for label in labels or []:
            self.store_label(label)

    def store_label(self, label: str) -> None:
        if label not in self._labels:
            self._labels.append(label)

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

class FileLabelAwareIterator:
    """Walks label subfolders of one or more source folders.
    Iterating again starts over from the first document."""
    def __init__(self, *source_folders: Union[str, Path], encoding: str = "utf-8"):
        if not source_folders:
            raise ValueError("At least one source folder is required")
        self.encoding = encoding
        self.source_folders = [Path(folder) for folder in source_folders]
        self._files: List[tuple[str, Path]] = []
        self.labels_source = LabelsSource()

        for folder in self.source_folders:
            if not folder.is_dir():
                raise FileNotFoundError(F"Source folder not found: {folder}")
            label_dirs = sorted(path for path in folder.iterdir() if path.is_dir())
            if not label_dirs:
                raise ValueError(F"Source folder {folder} has no label subfolders")
            for label_dir in label_dirs:
                self.labels_source.store_label(label_dir.name)
                for file in sorted(path for path in label_dir.iterdir() if path.is_file()):
                    self._files.append((label_dir.name, file))

    @property
    def labels(self) -> List[str]:
        return self.labels_source.labels

    def __len__(self):
        return len(self._files)

    def __iter__(self) -> Iterator[LabelledDocument]:
        for label, file in self._files:
            yield LabelledDocument(label=label, content=file.read_text(encoding=self.encoding), name=file.name)

#------------------#
#   tokenization   #
#------------------#
_COMMON_PUNCTUATION = re.compile(r"[\d.:,\"'()\[\]|/?!;]+")

def common_preprocess(token: str) -> str:
    """Strips digits and common punctuation, then lowercases."""
    return _COMMON_PUNCTUATION.sub("", token).lower()

def tokenize(text: str, preprocessor=common_preprocess) -> List[str]:
    """Splits on whitespace and preprocesses each token, dropping tokens left empty."""
    tokens = []
    for token in text.split():
        if preprocessor is not None:
            token = preprocessor(token)
        if token:
            tokens.append(token)
    return tokens
