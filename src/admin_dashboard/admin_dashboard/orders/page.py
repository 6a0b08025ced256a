from __future__ import annotations

import random
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Optional

from ..common.datetime_utils import today_local
from ..common.identifiers import next_item_key
from ..records.page import RecordPage
from .form import KitchenOrderForm, LineItemForm, SalesOrderForm
from .model import KitchenOrder, LineItem, SalesOrder


class SalesOrderPage(RecordPage[SalesOrder]):
    """Sales orders; product lines are staged on the open session until confirm."""

    def __init__(
        self,
        records: Iterable[SalesOrder] = (),
        *,
        clock: Callable[[], date] = today_local,
        rng: Optional[random.Random] = None,
    ):
        super().__init__("orders", SalesOrderForm(clock=clock, rng=rng), records)
        self._line_form = LineItemForm()

    def staged_products(self) -> list[LineItem]:
        self.session.require_open()
        return list(self.session.draft.get("products") or [])

    def add_line_item(self, values: Mapping[str, Any]) -> LineItem:
        products = self.staged_products()
        item = self._line_form.build(values, key=next_item_key(products))
        self.session.stage(products=products + [item])
        return item

    def remove_line_item(self, key: str) -> bool:
        products = self.staged_products()
        kept = [p for p in products if p.key != key]
        self.session.stage(products=kept)
        return len(kept) != len(products)


class KitchenOrderPage(RecordPage[KitchenOrder]):
    def __init__(self, records: Iterable[KitchenOrder] = ()):
        super().__init__("kitchen-orders", KitchenOrderForm(), records)
