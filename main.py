#!/usr/bin/env python3
"""
Main entry point for the Keyword Search Engine.

This script provides a command-line interface for the search engine.
"""

import argparse
import logging
import sys

from keyword_search import KeywordSearchEngine, SearchEngineError
import config


def main(argv=None):
    """Main entry point for the search engine."""
    parser = argparse.ArgumentParser(
        description="Keyword search engine with frequency-ranked OR queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                        # Start interactive search
  python main.py --docs docs.txt --noise-words nw.txt   # Use custom input files
  python main.py --query cat dog                        # Single query mode
  python main.py --build-only --stats                   # Just build index and report
        """
    )

    parser.add_argument(
        "--docs",
        type=str,
        default=None,
        help="File listing the documents to index, one per line (default: examples/data/docs.txt)"
    )

    parser.add_argument(
        "--noise-words",
        type=str,
        default=None,
        help="File listing noise words, one per line (default: examples/data/noisewords.txt)"
    )

    parser.add_argument(
        "--query",
        type=str,
        nargs="+",
        metavar="KEYWORD",
        default=None,
        help="Keywords to search for (non-interactive mode)"
    )

    parser.add_argument(
        "--build-only",
        action="store_true",
        help="Only build the index, don't start interactive search"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    parser.add_argument(
        "--no-autocorrect",
        action="store_true",
        help="Search for query keywords exactly as typed"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL})"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    overrides = {}
    if args.no_autocorrect:
        overrides["AUTO_CORRECT_ENABLED"] = False
    engine = KeywordSearchEngine(config_dict=overrides or None)

    # Build index
    try:
        engine.make_index(args.docs, args.noise_words)
    except SearchEngineError as e:
        print(f"Error building index: {e}")
        return 1

    # Show statistics if requested
    if args.stats:
        stats = engine.get_stats()
        print("\n=== Index Statistics ===")
        for key, value in stats.items():
            print(f"{key}: {value}")

    # Handle different modes
    if args.build_only:
        print("Index building complete. Exiting.")
        return 0

    if args.query:
        keywords, ranked = engine.search(" ".join(args.query))
        engine.result_formatter.print_results_table(ranked, keywords)
    else:
        try:
            engine.interactive_search()
        except KeyboardInterrupt:
            print("\nExiting.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
