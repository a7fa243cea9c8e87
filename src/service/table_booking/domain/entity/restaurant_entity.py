from datetime import datetime
from typing import List, Optional

import attrs


@attrs.define(frozen=True)
class OpeningHours:
    day_of_week: int  # 0 = Sunday
    open_time: str
    close_time: str
    is_closed: bool = False
    id: Optional[int] = None
    restaurant_id: Optional[int] = None


@attrs.define(frozen=True)
class Table:
    id: int
    restaurant_id: int
    table_number: str
    capacity: int
    is_active: bool = True


@attrs.define
class Restaurant:
    id: int
    name: str
    address: str
    phone: str
    description: Optional[str] = None
    email: Optional[str] = None
    cuisine: Optional[str] = None
    price_range: Optional[str] = None
    image_url: Optional[str] = None
    opening_hours: List[OpeningHours] = attrs.field(factory=list)
    tables: List[Table] = attrs.field(factory=list)
    created_at: Optional[datetime] = None

    def hours_for(self, day_of_week: int) -> Optional[OpeningHours]:
        return next((h for h in self.opening_hours if h.day_of_week == day_of_week), None)

    def find_table(self, table_id: int) -> Optional[Table]:
        return next((t for t in self.tables if t.id == table_id), None)
