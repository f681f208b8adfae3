#!/usr/bin/env python3
"""CLI script for fragmenting FASTA sequences from a source checkout.

Usage examples:
  python scripts/fragment_sequence.py -i inputs/genome.fasta -o fragments.fasta -m 10 -n 100
  python scripts/fragment_sequence.py -i inputs/genome.fasta -o fragments.fasta -m -200 -n 100 -f 8
"""

import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fastafrag.cli import main


if __name__ == "__main__":
    main()
