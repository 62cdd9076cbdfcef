from __future__ import annotations

import sys

from elbonian.cli import main

sys.exit(main())
