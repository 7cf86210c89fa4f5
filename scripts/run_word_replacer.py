#!/usr/bin/env python3
"""
Run the word replacer from a source checkout.

Usage:
    python scripts/run_word_replacer.py <input text file> <word replacements file> <bst|rbt|hash>

Same behaviour as the installed `word-replacer` command.
"""

import sys
from pathlib import Path

# Add the project root to Python path for imports
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from word_replacer_engine.core.word_replacer.cli import main


if __name__ == "__main__":
    sys.exit(main())
