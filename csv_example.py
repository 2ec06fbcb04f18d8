#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""This file contains the Iris training script."""

#-------------#
#   imports   #
#-------------#
import argparse
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union
from loguru import logger
from tqdm import tqdm
import torch
import torch.nn as nn
import torch.nn.functional as F
from torch.utils.tensorboard import SummaryWriter

# local import
from config import IrisConfig
from core import device, resource_path, seed_everything, setup_logging
from data import DataSet, read_csv_dataset
from evaluation import Evaluation

#------------#
#   models   #
#------------#
class IrisClassifier(nn.Module):
    """Two tanh hidden layers and a softmax output, Xavier initialised."""
    def __init__(self, din, dhidden, dout):
        super().__init__()
        self.fc1 = nn.Linear(din, dhidden)
        self.fc2 = nn.Linear(dhidden, dhidden)
        self.fc3 = nn.Linear(dhidden, dout)
        for layer in (self.fc1, self.fc2, self.fc3):
            nn.init.xavier_uniform_(layer.weight)
            nn.init.zeros_(layer.bias)

    def forward(self, x):
        x = torch.tanh(self.fc1(x))
        x = torch.tanh(self.fc2(x))
        return F.log_softmax(self.fc3(x), dim=1)

    def output(self, x):
        """Class probabilities."""
        self.eval()
        with torch.no_grad():
            return self(x).exp()

#-------------------------#
#   training, evaluation  #
#-------------------------#
def fit(model, dataset: DataSet, optimizer, criterion, iterations, listener_freq=100, sumwriter=None):
    """Full-batch training; every `listener_freq` iterations the score is logged."""
    model.to(device)
    model.train()
    x, y = dataset.features.to(device), dataset.labels.argmax(dim=1).to(device)
    score = float("nan")
    for iteration in tqdm(range(iterations), desc="Training", leave=False):
        y_pred = model(x)
        loss = criterion(y_pred, y)
        optimizer.zero_grad()
        loss.backward()
        optimizer.step()
        score = loss.item()
        if listener_freq and iteration % listener_freq == 0:
            logger.info(F"Score at iteration {iteration} is {score}")
            if sumwriter is not None:
                sumwriter.add_scalar('Score (Train)', score, iteration)
    return score

def evaluate(model, dataset: DataSet, num_classes) -> Evaluation:
    evaluation = Evaluation(num_classes, label_names=dataset.class_names)
    model.to(device)
    output = model.output(dataset.features.to(device))
    evaluation.eval(dataset.labels, output.cpu())
    return evaluation

#----------------#
#   executable   #
#----------------#
def run(config: IrisConfig = IrisConfig(), resources: Optional[Union[str, Path]] = None,
        logdir: Optional[str] = None) -> Evaluation:
    seed_everything(config.seed)
    dataset = read_csv_dataset(resource_path(config.resource, resources),
                               label_index=config.label_index,
                               num_classes=config.num_classes,
                               skip_lines=config.skip_lines,
                               delimiter=config.delimiter)
    if len(dataset) > config.batch_size:
        dataset = DataSet(dataset.features[:config.batch_size], dataset.labels[:config.batch_size], dataset.class_names)

    logger.info("Build model....")
    model = IrisClassifier(config.num_inputs, config.hidden_size, config.num_classes).to(device)
    criterion = nn.NLLLoss()
    optimizer = torch.optim.SGD(model.parameters(), lr=config.learning_rate, weight_decay=config.l2)

    dataset.normalize_zero_mean_unit_variance()
    dataset.shuffle(config.seed)
    train_set, test_set = dataset.split_test_and_train(config.fraction_train)

    sumwriter = SummaryWriter(log_dir=logdir) if logdir else None
    try:
        fit(model, train_set, optimizer, criterion, config.iterations, config.listener_freq, sumwriter)
        evaluation = evaluate(model, test_set, config.num_classes)
        if sumwriter is not None:
            sumwriter.add_scalar('Accuracy (Test)', evaluation.accuracy(), config.iterations)
    finally:
        if sumwriter is not None:
            sumwriter.close()

    logger.info(evaluation.stats())
    return evaluation

def main(argv=None):
    parser = argparse.ArgumentParser(description="Train a small feed-forward network on the Iris data set.")
    parser.add_argument("--resources", default=None, help="resource root holding iris.txt")
    parser.add_argument("--iterations", type=int, default=IrisConfig.iterations)
    parser.add_argument("--logdir", default=None, help="write TensorBoard scalars here")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    config = replace(IrisConfig(), iterations=args.iterations)
    return run(config, args.resources, args.logdir)

if __name__ == "__main__":
    main()
