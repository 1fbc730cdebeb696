"""Command line entry point.

Usage:
    python -m keyrank FILE... [--mode keywords|ngrams] [--limit N]
        [--window N] [--threshold X] [--evaluate] [--print] [--debug]
"""

import argparse
import json
import sys
from typing import List, Optional

from keyrank.app import rank_files
from keyrank.configuration.config import Config, MODES
from keyrank.ranking.strategies import SIMILARITY_THRESHOLD, WINDOW_SIZE
from keyrank.utils import get_logger


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='keyrank', description='Rank the keywords of tagged json documents with TextRank.'
    )
    parser.add_argument('files', nargs='+', help='the json documents to rank')
    parser.add_argument('-m', '--mode', choices=MODES, default='keywords')
    parser.add_argument('-l', '--limit', type=int, default=None, help='the number of results to keep')
    parser.add_argument('-w', '--window', type=int, default=WINDOW_SIZE, help='the co-reference window size')
    parser.add_argument('-t', '--threshold', type=float, default=SIMILARITY_THRESHOLD,
                        help='the ngram similarity threshold')
    parser.add_argument('--min-size', type=int, default=2)
    parser.add_argument('--max-size', type=int, default=5)
    parser.add_argument('--evaluate', action='store_true', help='match results with the annotated keywords')
    parser.add_argument('--log-path', default=None)
    parser.add_argument('-p', '--print', action='store_true', dest='print_',
                        help='print the outputs instead of writing them back')
    parser.add_argument('--debug', action='store_true')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    get_logger('keyrank', args.debug)
    config = Config(
        mode=args.mode,
        window_size=args.window,
        threshold=args.threshold,
        min_size=args.min_size,
        max_size=args.max_size,
        limit=args.limit,
        evaluate=args.evaluate,
        log_path=args.log_path
    )
    outputs = rank_files(args.files, config, write=not args.print_)
    if args.print_:
        print(json.dumps({str(file): output for file, output in outputs.items()}, indent=4))
    return 0


if __name__ == '__main__':
    sys.exit(main())
