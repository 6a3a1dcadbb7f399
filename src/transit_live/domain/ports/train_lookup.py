"""Train lookup port."""

from datetime import datetime
from typing import Any, Protocol


class TrainLookup(Protocol):
    """Port for looking up trains directly by station name."""

    async def find_train_info(self, station_name: str, date: datetime) -> dict[str, Any]:
        """Departure board entry of the train leaving at ``date``, or an empty dict."""
        ...

    async def get_train_progress(self, station_name: str, train_number: str, date: datetime) -> Any:
        """Raw progress payload of a train."""
        ...
