"""
Configuration settings for the Keyword Search Engine.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "examples" / "data"
DOCS_FILE = DATA_DIR / "docs.txt"  # Manifest: one document name per line
NOISE_WORDS_FILE = DATA_DIR / "noisewords.txt"  # One noise word per line

# Text processing settings
LOWERCASE = True  # Case-fold keywords
ENCODING = "utf-8"  # Encoding of documents and word lists

# Search settings
TOP_K_RESULTS = 5  # Number of documents returned per query

# Auto-correction settings
AUTO_CORRECT_ENABLED = True  # Correct query keywords missing from the index
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for auto-correction
MIN_WORD_LENGTH = 3  # Shorter keywords are never corrected

# Output settings
VERBOSE = True  # Log each indexed document
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Result formatting
SHOW_SCORES = True  # Show keyword frequencies in results
MAX_DOCUMENT_CHARS = 60  # Column width cap for document names
