from __future__ import annotations

import random
from typing import Optional

from ..core.constants import ORDER_CODE_MAX, ORDER_CODE_MIN


def random_code(rng: Optional[random.Random] = None) -> str:
    """Six digit code used for order codes and requirement IDs."""
    return str((rng or random).randint(ORDER_CODE_MIN, ORDER_CODE_MAX))


def next_item_key(items) -> str:
    """Key for a line item appended to ``items``; never reuses a key still present."""
    highest = max((int(i.key) for i in items if str(i.key).isdigit()), default=0)
    return str(max(highest, len(items)) + 1)
