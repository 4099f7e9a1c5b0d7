"""Per-factor circuit breaker with a call timeout."""

import asyncio
import inspect
import logging
import time
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

from config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CircuitStatus(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half-open"


@dataclass
class CircuitState:
    """Fault memory for one factor."""

    failures: int = 0
    last_fail_time: float = 0.0
    state: CircuitStatus = CircuitStatus.CLOSED


class FaultRegistry:
    """
    Circuit states keyed by factor id.

    Owned by the host process and shared across analysis runs, so a
    heuristic that keeps failing stays short-circuited between requests.
    States are only cleared by reset() or by a successful probe.
    """

    def __init__(self):
        self._circuits: dict[str, CircuitState] = {}

    def get(self, factor_id: str) -> CircuitState:
        if factor_id not in self._circuits:
            self._circuits[factor_id] = CircuitState()
        return self._circuits[factor_id]

    def snapshot(self) -> dict[str, dict]:
        """Copy of every circuit state, for monitoring."""
        return {
            factor_id: {**asdict(circuit), "state": circuit.state.value}
            for factor_id, circuit in self._circuits.items()
        }

    def reset(self, factor_id: str | None = None) -> None:
        """Clear one circuit, or all of them when no factor id is given."""
        if factor_id is None:
            logger.info("Resetting all circuits")
            self._circuits.clear()
        else:
            logger.info(f"Resetting circuit {factor_id}")
            self._circuits.pop(factor_id, None)


class CircuitBreaker:
    """
    Runs factor operations under fault isolation.

    closed -> open after `failure_threshold` consecutive failures;
    open -> half-open once `reset_timeout` seconds have passed since the
    last failure; half-open -> closed on a successful probe, back to open
    on a failed one. A call that exceeds its timeout counts as a failure.

    Sync operations run on `executor`, which outlives any single event loop.
    A call that times out is abandoned, not joined: its thread finishes in
    the background and the run carries on with the fallback.
    """

    def __init__(
        self,
        registry: FaultRegistry | None = None,
        failure_threshold: int = settings.circuit_failure_threshold,
        reset_timeout: float = settings.circuit_reset_timeout,
        call_timeout: float = settings.factor_timeout,
        clock: Callable[[], float] = time.monotonic,
        executor: Executor | None = None,
    ):
        self.registry = registry if registry is not None else FaultRegistry()
        self.failure_threshold = failure_threshold
        self.reset_timeout = reset_timeout
        self.call_timeout = call_timeout
        self.clock = clock
        self.executor = executor or ThreadPoolExecutor(
            max_workers=settings.factor_workers, thread_name_prefix="factor"
        )

    async def execute(
        self,
        factor_id: str,
        operation: Callable[[], T | Awaitable[T]],
        fallback: T,
        timeout: float | None = None,
    ) -> T:
        """
        Run the operation, returning the fallback instead of raising.

        Args:
            factor_id: Circuit key
            operation: Zero-argument callable; sync callables run on the executor
            fallback: Value returned on failure, timeout or open circuit
            timeout: Per-call limit in seconds (defaults to call_timeout)
        """
        circuit = self.registry.get(factor_id)

        if circuit.state == CircuitStatus.HALF_OPEN:
            # A probe is already in flight
            logger.info(f"Circuit {factor_id} half-open, probe pending; using fallback")
            return fallback

        if circuit.state == CircuitStatus.OPEN:
            if self.clock() - circuit.last_fail_time > self.reset_timeout:
                circuit.state = CircuitStatus.HALF_OPEN
                logger.info(f"Circuit {factor_id} half-open, attempting reset")
            else:
                logger.info(f"Circuit {factor_id} open, using fallback")
                return fallback

        try:
            result = await asyncio.wait_for(
                self._invoke(operation),
                timeout=self.call_timeout if timeout is None else timeout,
            )
        except asyncio.TimeoutError:
            self._on_failure(factor_id, f"Factor {factor_id} timeout")
            return fallback
        except asyncio.CancelledError:
            # Never leave a circuit stuck half-open
            if circuit.state == CircuitStatus.HALF_OPEN:
                circuit.state = CircuitStatus.OPEN
            raise
        except Exception as e:
            self._on_failure(factor_id, str(e) or type(e).__name__)
            return fallback

        self._on_success(factor_id)
        return result

    def states(self) -> dict[str, dict]:
        return self.registry.snapshot()

    async def _invoke(self, operation: Callable[[], Any]) -> Any:
        if inspect.iscoroutinefunction(operation):
            return await operation()
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(self.executor, operation)
        if inspect.isawaitable(result):
            result = await result
        return result

    def _on_success(self, factor_id: str) -> None:
        circuit = self.registry.get(factor_id)
        if circuit.state != CircuitStatus.CLOSED:
            logger.info(f"Circuit {factor_id} reset to closed")
        circuit.failures = 0
        circuit.last_fail_time = 0.0
        circuit.state = CircuitStatus.CLOSED

    def _on_failure(self, factor_id: str, reason: str) -> None:
        circuit = self.registry.get(factor_id)
        circuit.failures += 1
        circuit.last_fail_time = self.clock()

        if circuit.state == CircuitStatus.HALF_OPEN or circuit.failures >= self.failure_threshold:
            circuit.state = CircuitStatus.OPEN
            logger.warning(f"Circuit {factor_id} opened after {circuit.failures} failures")

        logger.warning(
            f"Factor {factor_id} failed ({circuit.failures} consecutive): {reason}; using fallback"
        )
