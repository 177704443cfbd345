"""
run_composer.py - CLI Entry Point

This script serves as the command-line interface entry point for the
Header Composer project. It forwards execution to the modularized CLI
logic defined in `src/header_composer/cli.py`.

Usage:
    python run_composer.py first.png second.png [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_composer.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import header_composer.cli as hc_cli

if __name__ == "__main__":
    sys.exit(hc_cli.main())
