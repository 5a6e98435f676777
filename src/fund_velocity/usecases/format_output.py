from __future__ import annotations

import json
from collections import OrderedDict

from fund_velocity.domain.messages import Decision


class FormatOutput:
    # Only id, customer_id, accepted are emitted, in that order, compact.
    def __call__(self, msg: Decision) -> str:
        payload = OrderedDict(
            [("id", msg.id), ("customer_id", msg.customer_id), ("accepted", msg.accepted)]
        )
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
