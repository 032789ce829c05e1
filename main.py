import argparse
import sys

from config import HASH_BASE, HASH_MODULUS, OUTPUT_FORMAT, LANGUAGE, OUTPUT_FORMATS
from searcher.errors import SearchError
from searcher.search_engine import SearchEngine
from searcher.validation import parse_radius, validate_pattern
from utils.logger import setup_logger
from utils.messages import LANGUAGES, error_message, message


def build_parser():
    parser = argparse.ArgumentParser(description="Rabin-Karp text search with context")
    parser.add_argument("input_file", help="Text file to search in")
    parser.add_argument("output_file", help="File the report is written to")
    parser.add_argument("--pattern", help="Search string (prompted for if omitted)")
    parser.add_argument("--radius", help="Context radius in characters (prompted for if omitted)")
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default=OUTPUT_FORMAT, help="Report format")
    parser.add_argument("--lang", choices=LANGUAGES, default=LANGUAGE if LANGUAGE in LANGUAGES else "en", help="Display language")
    parser.add_argument("--base", type=int, default=HASH_BASE, help="Rolling hash base")
    parser.add_argument("--modulus", type=int, default=HASH_MODULUS, help="Rolling hash modulus")
    parser.add_argument("--no-log-file", action="store_true", help="Log to the console only")
    return parser


def prompt(text, input_func=input):
    try:
        return input_func(text)
    except EOFError:
        return ""


def main(argv=None, input_func=input):
    args = build_parser().parse_args(argv)

    try:
        logger = setup_logger(log_to_file=not args.no_log_file)
    except SearchError as e:
        print(error_message(e, args.lang), file=sys.stderr)
        return e.exit_code
    logger.info("Starting Rabin-Karp text search...")

    try:
        engine = SearchEngine(base=args.base, modulus=args.modulus, output_format=args.output_format, language=args.lang)

        # The input file is read before asking for anything else
        text = engine.load(args.input_file)

        raw_pattern = args.pattern if args.pattern is not None else prompt(message("prompt_pattern", args.lang), input_func)
        pattern = validate_pattern(raw_pattern)

        raw_radius = args.radius if args.radius is not None else prompt(message("prompt_radius", args.lang), input_func)
        radius = parse_radius(raw_radius)

        outcome = engine.process(text, pattern, radius, args.output_file)
    except SearchError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        logger.error(error_message(e, args.lang))
        return e.exit_code

    logger.info(f"Search complete. {len(outcome.matches)} matches in {outcome.elapsed:.6f}s.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
