#!/usr/bin/env python3
"""Pairing demonstration runner.

Usage:
    python scripts/run_pairing.py Beyonce Jay-Z
    python scripts/run_pairing.py Beyonce Jay-Z --not-a-person
    python scripts/run_pairing.py Beyonce Jay-Z --not-a-person --policy asymmetric -v
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from pairing.cli import main


if __name__ == "__main__":
    sys.exit(main())
