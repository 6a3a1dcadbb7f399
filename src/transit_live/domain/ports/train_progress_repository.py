"""Train progress repository port."""

from datetime import datetime
from typing import Any, Protocol

from transit_live.domain.models.fetch_result import FetchResult


class TrainProgressRepository(Protocol):
    """Port for retrieving the live progress of a single train."""

    async def get_train_progress(
        self, origin_code: str, train_number: str, date: datetime
    ) -> FetchResult[Any]:
        """Get the carrier's raw progress payload for a train."""
        ...
