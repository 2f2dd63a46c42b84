"""Allow running gtm with ``python -m gtm``."""

import sys

from gtm.cli import main

if __name__ == "__main__":
	sys.exit(main())
