#!/usr/bin/env python3
"""
fop-console CLI Entry Point

Runs the fop command-line tool from a source checkout.
"""

import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent / 'src'
if src_path.exists():
    sys.path.insert(0, str(src_path))

from fop_console.main import main

if __name__ == '__main__':
    main()
