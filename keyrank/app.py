"""Module implementing the routine ranking a batch of document files.

Each file is a `json` document holding its tagged sentences; the
ranking, and its matches with the annotated keywords when asked,
is written back to the file and returned to the caller.
"""

import logging
from typing import Dict, Sequence

from tqdm import tqdm

from keyrank.configuration.config import Config
from keyrank.data.factories import default_keywords_parser, default_sentence_parser
from keyrank.data.types import Data, FilePath
from keyrank.data.utils import dump_json, load_json
from keyrank.evaluation.factories import default_annotation_evaluator
from keyrank.utils import log

logger = logging.getLogger(__name__)


def rank_files(files: Sequence[FilePath], config: Config, write: bool = True) -> Dict[FilePath, Data]:
    """Ranks the terms of each document file.

    Args:
        files: The locations of the document files.
        config: The ranking configuration.
        write: Whether or not to write the outputs back into the files.

    Returns:
        The outputs of each file: the `[text, score]` ranking under
        `config.output_field` and, if `config.evaluate` is set, the
        keyword matches under `<output_field>_matches`.
    """
    extractor = config.extractor()
    parse_sentences = default_sentence_parser(config.sentences_field)
    parse_keywords = default_keywords_parser(config.keywords_field)
    evaluator = default_annotation_evaluator() if config.evaluate else None

    outputs = {}
    tq = tqdm(total=len(files), disable=len(files) < 2)
    tq.set_description(f'rank {config.mode} ')
    for file in files:
        data = load_json(file)
        ranked = extractor(parse_sentences(data), config.limit)
        output = {config.output_field: [[text, score] for text, score in ranked]}
        if evaluator is not None:
            matches = evaluator(ranked, parse_keywords(data))
            output[f'{config.output_field}_matches'] = [match.as_data() for match in matches]
            logger.info('%s: %d keywords matched', file, len(matches))
        outputs[file] = output
        logger.info('%s: %d ranked %s', file, len(ranked), config.mode)
        if write:
            data.update(output)
            dump_json(data, file)
        if config.log_path is not None:
            log(f'{file} {config.mode} {len(ranked)}', config.log_path)
        tq.update(1)
    tq.close()
    return outputs
