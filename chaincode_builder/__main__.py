"""Allow ``python -m chaincode_builder``."""

import sys

from .main import main

sys.exit(main())
