"""
Minimal saga runner used by checkout.

Steps run in order against a shared ``ctx`` dict. When one raises, the
compensations of the steps that already completed run newest-first and the
original exception is re-raised. ``ctx["saga"]`` records what happened so the
caller can log it.
"""
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional

import structlog

from shared.observability import titleflow_saga_compensation_total

logger = structlog.get_logger(__name__)

Action = Callable[[dict], Awaitable[None]]


@dataclass
class SagaStep:
    name: str
    action: Action
    compensation: Optional[Action] = None


class SagaOrchestrator:
    def __init__(self):
        self.steps: List[SagaStep] = []

    def add_step(self, name: str, action: Action, compensation: Optional[Action] = None):
        self.steps.append(SagaStep(name, action, compensation))
        return self

    async def execute(self, ctx: dict) -> List[str]:
        """Returns the names of the completed steps."""
        record = ctx.setdefault("saga", {"completed": [], "failed_step": None, "compensated": []})
        done: List[SagaStep] = []

        for step in self.steps:
            try:
                await step.action(ctx)
            except Exception as e:
                record["failed_step"] = step.name
                logger.error("saga_step_failed", step=step.name, error=str(e))
                await self._compensate(done, ctx, record)
                raise
            done.append(step)
            record["completed"].append(step.name)

        return record["completed"]

    async def _compensate(self, done: List[SagaStep], ctx: dict, record: dict):
        logger.info("saga_rollback_started", steps=[s.name for s in done])
        for step in reversed(done):
            if step.compensation is None:
                continue
            try:
                await step.compensation(ctx)
            except Exception as e:
                # Keep going: one broken compensation must not strand the others
                logger.critical("saga_compensation_failed", step=step.name, error=str(e))
                continue
            record["compensated"].append(step.name)
            titleflow_saga_compensation_total.labels(step_name=step.name).inc()
