"""
Command-line front end for the word index and the board solver.

Usage:
    wordgrid complete [--words PATH] [--max-words N] [--limit K] [-v]
    wordgrid solve BOARD [--size N] [--words PATH] [--max-words N] [--max-results M] [-v]

Examples:
    wordgrid complete --words titles.txt --max-words 50000
    wordgrid solve xqaezotsindlyruk --size 4
"""
import argparse
import logging
import sys

from wordgrid.errors import WordgridError
from wordgrid.grid import Grid
from wordgrid.metrics import StageTimer
from wordgrid.settings import settings
from wordgrid.solver import BoardSearcher, rank_words
from wordgrid.trie import load_trie

logger = logging.getLogger("wordgrid")


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--words", default=str(settings.DICTIONARY_PATH),
                        help="Word list, one word per line")
    common.add_argument("--max-words", type=_non_negative, default=settings.MAX_WORDS,
                        help="Stop loading after this many words")
    common.add_argument("-v", "--verbose", action="store_true", help="Log load and solve timings")

    parser = argparse.ArgumentParser(prog="wordgrid", description="Trie autocompletion and Boggle solving")
    sub = parser.add_subparsers(dest="command", required=True)

    complete = sub.add_parser("complete", parents=[common], help="Interactive prefix search")
    complete.add_argument("--limit", type=_non_negative, default=settings.AUTOCOMPLETE_LIMIT)

    solve = sub.add_parser("solve", parents=[common], help="List the words on a board")
    solve.add_argument("board", help="Board letters in row-major order")
    solve.add_argument("--size", type=int, default=settings.BOARD_SIZE)
    solve.add_argument("--max-results", type=_non_negative, default=0, help="0 prints every word")
    return parser


def run_complete(args, stdin, stdout) -> int:
    # Titles and phrases are matched exactly as written
    trie = load_trie(args.words, args.max_words)
    stdout.write("Search for a word (Ctrl-D to quit)\n")
    for line in stdin:
        query = line.strip()
        for word in trie.autocomplete(query, args.limit):
            stdout.write(f"{word}\n")
        stdout.write("\n")
    return 0


def run_solve(args, stdout) -> int:
    timer = StageTimer()
    with timer.stage("grid"):
        grid = Grid.from_data(args.board, args.size)
    with timer.stage("load") as st:
        trie = load_trie(args.words, args.max_words, settings.MIN_WORD_LENGTH, settings.LOWERCASE_WORDS)
        st.items = len(trie)
    with timer.stage("solve") as st:
        found = BoardSearcher(grid, trie).solve()
        st.items = len(found)
    for word in rank_words(found, args.max_results):
        stdout.write(f"{word}\n")
    logger.info("Timings %s, counts %s", timer.summary(), timer.counts())
    return 0


def main(argv=None, stdin=None, stdout=None) -> int:
    args = _build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    try:
        if args.command == "complete":
            return run_complete(args, stdin, stdout)
        return run_solve(args, stdout)
    except WordgridError as e:
        print(f"wordgrid: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
