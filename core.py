#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""Shared plumbing for the examples: device, seeding, logging and resources."""

#--------------------#
#   imports/device   #
#--------------------#
# generic imports
import os
import sys
import random
from pathlib import Path
from typing import Optional, Union
# logging
from loguru import logger
# ml modules
import numpy as np
import torch

# device
device = torch.device('cuda' if torch.cuda.is_available() else 'cpu')

# keep printed tensors short
torch.set_printoptions(threshold=10, edgeitems=10)

#---------------#
#   resources   #
#---------------#
RESOURCE_ROOT = Path(__file__).resolve().parent / "resources"

def resource_path(name: str, root: Optional[Union[str, Path]] = None) -> Path:
    """Resolves a resource name like "paravec/labeled" against the resource root.
    The root defaults to $DL_EXAMPLES_RESOURCES, then the bundled resources/ folder."""
    if root is None:
        root = os.environ.get("DL_EXAMPLES_RESOURCES", RESOURCE_ROOT)
    path = Path(root) / name
    if not path.exists():
        raise FileNotFoundError(F"Resource '{name}' not found under {root}")
    return path

#-------------#
#   logging   #
#-------------#
LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <level>{message}</level>"

def setup_logging(level: str = "INFO") -> None:
    """Replaces loguru's default handler with a single console sink."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())

#-------------#
#   seeding   #
#-------------#
def seed_everything(seed: int) -> None:
    """Seeds python, numpy and torch."""
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
