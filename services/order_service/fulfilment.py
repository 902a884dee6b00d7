"""
One-shot fulfilment timers.

The provider gives no push notification when documents are ready, so every
checkout arms a timer that flips the order to ``completed`` (and its items to
``ready``) after a fixed delay. This is the only code path that performs that
transition.
"""
import asyncio
from typing import Optional, Set

import structlog

from shared.config import settings
from shared.config import database
from shared.observability import titleflow_orders_fulfilled_total, titleflow_pending_fulfilments
from .repository import OrderRepository

logger = structlog.get_logger(__name__)


class FulfilmentScheduler:
    def __init__(self):
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(self, order_id: str, delay: Optional[float] = None) -> asyncio.Task:
        if delay is None:
            delay = settings.FULFILMENT_DELAY_SECONDS

        task = asyncio.create_task(self._fulfil_later(order_id, delay), name=f"fulfil-{order_id}")
        self._tasks.add(task)
        titleflow_pending_fulfilments.inc()
        task.add_done_callback(self._forget)
        logger.info("fulfilment_scheduled", order_id=order_id, delay_seconds=delay)
        return task

    def _forget(self, task: asyncio.Task):
        self._tasks.discard(task)
        titleflow_pending_fulfilments.dec()

    async def _fulfil_later(self, order_id: str, delay: float):
        await asyncio.sleep(delay)
        try:
            async with database.AsyncSessionLocal() as db:
                order = await OrderRepository.mark_fulfilled(db, order_id)
        except Exception as e:
            # Nobody awaits this task; the log line is the only trace of the failure
            logger.error("fulfilment_failed", order_id=order_id, error=str(e))
            return

        if order is None:
            logger.warning("fulfilment_order_missing", order_id=order_id)
        elif order.status == "completed":
            titleflow_orders_fulfilled_total.inc()
            logger.info("order_fulfilled", order_id=order_id, items=len(order.items))
        else:
            logger.info("fulfilment_skipped", order_id=order_id, status=order.status)

    async def drain(self):
        """Wait for every armed timer to fire."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def shutdown(self):
        """Cancel outstanding timers (application shutdown)."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


fulfilment_scheduler = FulfilmentScheduler()
