#!/usr/bin/env python3
"""
mailindex setup
Interactive first-run configuration for the mailindex mail indexer
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mailindex.app_runner import AppRunner


def main():
    """Main entry point"""
    AppRunner().run()


if __name__ == "__main__":
    main()
