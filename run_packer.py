"""
run_packer.py: CLI entry point

Forwards execution to the CLI defined in `src/grid_packer/cli.py` so the
tool can run straight from a checkout.

Usage:
    python run_packer.py --config layouts/sponsors.toml [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_packer.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import grid_packer.cli as gp_cli

if __name__ == "__main__":
    raise SystemExit(gp_cli.main())
