#!/usr/bin/env python3
"""
Example usage of the Keyword Search Engine.

This script demonstrates how to use the search engine programmatically
for various search tasks.
"""

import sys
from pathlib import Path

# Add parent directory to path to import keyword_search
sys.path.append(str(Path(__file__).parent.parent))

from keyword_search import KeywordSearchEngine, KeywordIndex, QueryEngine, insert_last_occurrence, Occurrence
import config

DATA_DIR = Path(__file__).parent / "data"


def basic_search_example():
    """Demonstrate basic search functionality."""
    print("=== Basic Search Example ===")

    engine = KeywordSearchEngine()
    engine.make_index(DATA_DIR / "docs.txt", DATA_DIR / "noisewords.txt")

    queries = [
        ("cat", "dog"),
        ("sheep", "roses"),
        ("traffic", "bees"),
        ("unicorn", "dragon"),
    ]

    for kw1, kw2 in queries:
        print(f"\nSearching for: '{kw1} or {kw2}'")
        results = engine.top5search(kw1, kw2)
        if results:
            for i, document in enumerate(results, 1):
                print(f"  {i}. {document}")
        else:
            print("  No results found.")


def autocorrect_example():
    """Demonstrate auto-correction of query keywords."""
    print("\n=== Auto-correction Example ===")

    engine = KeywordSearchEngine()
    engine.make_index(DATA_DIR / "docs.txt", DATA_DIR / "noisewords.txt")

    for query in ["catt or dgo", "Roses! or sheeep"]:
        keywords, ranked = engine.search(query)
        print(f"\nQuery: '{query}' -> searched {keywords}")
        engine.result_formatter.print_results_table(ranked, keywords)


def insertion_example():
    """Show where the binary search places a new occurrence."""
    print("\n=== Ranked Insertion Example ===")

    occurrences = [Occurrence(f"doc{i}", f) for i, f in enumerate([12, 8, 7, 5, 3, 2])]
    occurrences.append(Occurrence("new", 6))
    print(f"Before: {occurrences}")
    midpoints = insert_last_occurrence(occurrences)
    print(f"After:  {occurrences}")
    print(f"Midpoints examined: {midpoints}")


def in_memory_index_example():
    """Build an index directly from keyword maps, without files."""
    print("\n=== In-memory Index Example ===")

    index = KeywordIndex()
    index.merge({"cat": Occurrence("d1", 3), "hat": Occurrence("d1", 1)})
    index.merge({"cat": Occurrence("d2", 5)})
    index.merge({"hat": Occurrence("d3", 4)})

    engine = QueryEngine(index, config)
    print(f"cat: {index.get_occurrences('cat')}")
    print(f"hat: {index.get_occurrences('hat')}")
    print(f"cat or hat: {engine.top_matches('cat', 'hat')}")


def main():
    """Run all examples."""
    print("Keyword Search Engine - Example Usage")
    print("=" * 50)

    try:
        basic_search_example()
        autocorrect_example()
        insertion_example()
        in_memory_index_example()

        print("\n" + "=" * 50)
        print("All examples completed successfully!")

    except Exception as e:
        print(f"Error running examples: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
