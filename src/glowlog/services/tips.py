"""Daily motivational tip with fixed fallbacks."""

import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

NO_SOURCE_TIP = "Drink plenty of water today for glowing skin!"
EMPTY_TIP = "Smile, it's the best face yoga!"
ERROR_TIP = "Consistency is the key to natural beauty."

TIP_PROMPT = (
    "Give me a very short, one-sentence motivational tip for face yoga "
    "or skin health. Keep it under 15 words."
)

TipFetcher = Callable[[str], Awaitable[str | None]]


class DailyTipService:
    """Fetches a one-line tip, never failing the caller."""

    def __init__(self, fetcher: TipFetcher | None = None):
        self.fetcher = fetcher

    @property
    def has_source(self) -> bool:
        return self.fetcher is not None

    async def get_tip(self) -> str:
        if self.fetcher is None:
            return NO_SOURCE_TIP
        try:
            text = await self.fetcher(TIP_PROMPT)
        except Exception:
            logger.exception("Tip fetch failed")
            return ERROR_TIP
        text = (text or "").strip()
        return text or EMPTY_TIP
