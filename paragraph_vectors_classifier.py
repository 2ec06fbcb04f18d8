#----------------------------------#
#   Deep Learning * Examples       #
#----------------------------------#
"""Document classification with paragraph vectors.

Paragraph vectors are used the way LDA is used for topic-space modelling: a
few labelled categories are available for training, and the goal is to find
which categories a handful of unlabeled documents fall into.

Each unlabeled document is reduced to the centroid of its word vectors and
compared (cosine) with the paragraph vector learned for every label. A
document may sit close to several labels at once with different weights.
"""

# generic
import argparse
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union
from loguru import logger
# ml
from gensim.models.doc2vec import Doc2Vec, TaggedDocument
# personal
from config import ParagraphVectorsConfig
from core import resource_path, seed_everything, setup_logging
from paravec_data import FileLabelAwareIterator, tokenize
from paravec_tools import LabelSeeker, MeansBuilder

#--------------#
#   training   #
#--------------#
def to_tagged_documents(iterator: FileLabelAwareIterator, tokenizer=tokenize) -> List[TaggedDocument]:
    """Every document is tagged with its label, so each label gets one paragraph vector."""
    return [TaggedDocument(words=tokenizer(document.content), tags=[document.label]) for document in iterator]

def train_paragraph_vectors(iterator: FileLabelAwareIterator,
                            config: ParagraphVectorsConfig = ParagraphVectorsConfig(),
                            tokenizer=tokenize) -> Doc2Vec:
    corpus = to_tagged_documents(iterator, tokenizer)
    model = Doc2Vec(dm=0, # PV-DBOW
                    dbow_words=1 if config.train_word_vectors else 0,
                    vector_size=config.layer_size,
                    window=config.window_size,
                    alpha=config.learning_rate,
                    min_alpha=config.min_learning_rate,
                    min_count=config.min_word_frequency,
                    batch_words=config.batch_size,
                    epochs=config.epochs,
                    seed=config.seed,
                    workers=1) # single worker keeps runs reproducible
    model.build_vocab(corpus)
    logger.info(F"Training paragraph vectors on {len(corpus)} documents, {len(model.wv)} words, labels {iterator.labels}")
    model.train(corpus, total_examples=model.corpus_count, epochs=model.epochs)
    return model

#----------------#
#   classifying  #
#----------------#
def classify(model: Doc2Vec, labels: List[str], unlabeled: FileLabelAwareIterator,
             tokenizer=tokenize) -> Dict[str, List[Tuple[str, float]]]:
    """Scores every unlabeled document against every label and logs the result.
    Results are keyed by document title (label/file name); the folder label
    is only shown as a heading, it plays no part in the scoring."""
    means_builder = MeansBuilder(model.wv, tokenizer)
    seeker = LabelSeeker(labels, model.dv)

    results = {}
    for document in unlabeled:
        document_as_centroid = means_builder.document_as_vector(document)
        scores = seeker.get_scores(document_as_centroid)

        logger.info(F"Document '{document.label}' falls into the following categories: ")
        for label, score in scores:
            logger.info(F"        {label}: {score}")
        results[document.title] = scores
    return results

#----------------#
#   executable   #
#----------------#
def run(config: ParagraphVectorsConfig = ParagraphVectorsConfig(),
        resources: Optional[Union[str, Path]] = None) -> Dict[str, List[Tuple[str, float]]]:
    seed_everything(config.seed)
    iterator = FileLabelAwareIterator(resource_path(config.labeled_resource, resources))
    model = train_paragraph_vectors(iterator, config)

    unlabeled = FileLabelAwareIterator(resource_path(config.unlabeled_resource, resources))
    return classify(model, iterator.labels, unlabeled)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Classify unlabeled documents with paragraph vectors.")
    parser.add_argument("--resources", default=None, help="resource root holding paravec/labeled and paravec/unlabeled")
    parser.add_argument("--epochs", type=int, default=ParagraphVectorsConfig.epochs)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    config = replace(ParagraphVectorsConfig(), epochs=args.epochs)
    return run(config, args.resources)

if __name__ == "__main__":
    main()
