"""
Entry point for running helixcalc as a module.

Usage:
    python -m helixcalc reducer --input reducer_input.json
    python -m helixcalc make-example --kind bearing
    python -m helixcalc serve --port 8000
"""

import sys

from helixcalc.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
