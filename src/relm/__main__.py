"""Allow ``python -m relm``."""

import sys

from relm.cli.main import main

sys.exit(main())
