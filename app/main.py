"""
Console Frontend for Personal Finance

Install the package, then run either entry point:

    personal-finance
    python app/main.py
"""

import sys

from personal_finance.cli import main


if __name__ == "__main__":
    sys.exit(main())
