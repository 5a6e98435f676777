from __future__ import annotations

import sys

from fund_velocity.main import main

sys.exit(main())
