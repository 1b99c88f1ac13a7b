"""
Base agent class for the analysis workflows.

Every analysis runs through the same small state machine:

    IDLE --(valid request)--> PENDING --(result persisted)--> COMPLETED
      ^                          |                                |
      +------(failure)-----------+                                |
      +------------------------(reset)----------------------------+

- Input is validated before any transition; invalid input leaves the state as is.
- A request made while PENDING is rejected with WorkflowBusy.
- If computing or persisting fails the agent returns to IDLE, never COMPLETED.
- The simulated latency is the only suspension point.
"""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from constants import Messages
from debug_sleep import DebugSleep
from models import CareerAssistantError, WorkflowBusy
from storage.app_storage import PersistenceStore
from storage.logs_manager import LogsManager


class WorkflowState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    COMPLETED = "completed"


class BaseAgent:
    """Shared state machine and logging for the analysis agents."""

    workflow_name = "Workflow"

    def __init__(
        self,
        store: PersistenceStore,
        logs_manager: LogsManager,
        delay: float = 0.0,
        sleeper: Optional[DebugSleep] = None,
    ):
        """
        Args:
            store: Persistence store results are written through
            logs_manager: Instance of LogsManager for async logging
            delay: Simulated latency in seconds before the result is computed
            sleeper: Optional DebugSleep (defaults to one bound to logs_manager)
        """
        self.store = store
        self.logs_manager = logs_manager
        self.delay = delay
        self.sleeper = sleeper or DebugSleep(logs_manager)
        self.state = WorkflowState.IDLE
        self.last_result = None

    @property
    def is_pending(self) -> bool:
        return self.state is WorkflowState.PENDING

    def reset(self) -> None:
        """Return a completed (or idle) workflow to IDLE, dropping the last result."""
        if self.is_pending:
            raise WorkflowBusy(Messages.WORKFLOW_BUSY.format(self.workflow_name))
        self.state = WorkflowState.IDLE
        self.last_result = None

    async def _execute(
        self,
        validate: Callable[[], Any],
        compute: Callable[[Any], Awaitable[Any]],
    ) -> Any:
        """
        Run one request through the state machine.

        Args:
            validate: Synchronous check of the request; returns a context passed
                      to `compute` or raises a CareerAssistantError.
            compute: Coroutine function producing (and persisting) the result.
        """
        if self.is_pending:
            await self.logs_manager.warning(Messages.WORKFLOW_BUSY.format(self.workflow_name))
            raise WorkflowBusy(Messages.WORKFLOW_BUSY.format(self.workflow_name))

        try:
            context = validate()
        except CareerAssistantError as e:
            await self.logs_manager.warning(f"{self.workflow_name} rejected: {str(e)}")
            raise

        # No await between the busy check and this transition
        self.state = WorkflowState.PENDING
        self.last_result = None
        await self.logs_manager.log_workflow_started(self.workflow_name)

        try:
            await self.sleeper.sleep(self.delay, f"{self.workflow_name} in progress")
            result = await compute(context)
        except asyncio.CancelledError:
            self.state = WorkflowState.IDLE
            raise
        except Exception as e:
            self.state = WorkflowState.IDLE
            await self.logs_manager.log_workflow_failed(self.workflow_name, e)
            raise

        self.state = WorkflowState.COMPLETED
        self.last_result = result
        await self.logs_manager.log_workflow_completed(
            self.workflow_name, getattr(result, "id", "")
        )
        return result
