"""Bounded retry policy for flaky pipeline stages."""

from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from pydantic import BaseModel, Field

from ghreport.core.exceptions import RetryExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy(BaseModel):
    """Call a function up to ``max_attempts`` times, sleeping ``delay`` seconds between tries.

    Only exceptions listed in ``retry_on`` are retried; anything else propagates
    immediately. A zero delay re-invokes straight away.
    """

    model_config = {"arbitrary_types_allowed": True}

    max_attempts: int = Field(default=4, ge=1)
    delay: float = Field(default=0.0, ge=0.0)
    retry_on: tuple[type[BaseException], ...] = (Exception,)

    def call(self, fn: Callable[[], T], sleep: Callable[[float], None] = time.sleep) -> tuple[int, T]:
        """Run ``fn`` until it succeeds.

        Returns:
            Tuple of (attempts used, value returned by ``fn``).

        Raises:
            RetryExhaustedError: every attempt failed; wraps the last error.
        """
        attempt = 1
        while True:
            try:
                return attempt, fn()
            except self.retry_on as exc:
                logger.warning("Attempt %d/%d failed: %s", attempt, self.max_attempts, exc)
                if attempt >= self.max_attempts:
                    raise RetryExhaustedError(attempt, exc) from exc
            if self.delay:
                sleep(self.delay)
            attempt += 1
