import time

import httpx
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.observability import titleflow_checkout_total, titleflow_checkout_duration_seconds
from shared.provider import ProviderClient
from .checkout_saga import build_checkout_saga, EmptyCartError
from .fulfilment import fulfilment_scheduler

logger = structlog.get_logger(__name__)


class CheckoutService:
    @staticmethod
    async def checkout(db: AsyncSession, client: httpx.AsyncClient, provider: ProviderClient, session_id: str):
        """Runs the checkout saga for one cart. Returns the created order."""
        ctx = {
            "db": db,
            "client": client,
            "provider": provider,
            "scheduler": fulfilment_scheduler,
            "session_id": session_id,
        }
        saga = build_checkout_saga()
        started = time.perf_counter()
        try:
            await saga.execute(ctx)
        except EmptyCartError:
            titleflow_checkout_total.labels(status="empty").inc()
            raise
        except Exception:
            titleflow_checkout_total.labels(status="failed").inc()
            saga_record = ctx.get("saga", {})
            logger.error(
                "checkout_failed",
                session_id=session_id,
                failed_step=saga_record.get("failed_step"),
                compensated=saga_record.get("compensated"),
            )
            raise
        finally:
            titleflow_checkout_duration_seconds.observe(time.perf_counter() - started)

        titleflow_checkout_total.labels(status="success").inc()
        logger.info("checkout_completed", session_id=session_id, order_id=ctx["order_id"])
        return ctx["order"]
