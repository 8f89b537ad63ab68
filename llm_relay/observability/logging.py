"""
Structured logging for upstream calls.

Every line is prefixed with ``[provider=... model=... request_id=...]``.
Only call metadata is logged; message contents and API keys never reach
these helpers.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

# Maps a failure to a short label such as "timeout" or "rate_limit"
Categorizer = Callable[[Exception], str]


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class ProviderLogger:
    """Logger bound to one provider."""

    def __init__(self, provider_name: str, categorize: Optional[Categorizer] = None,
                 namespace: str = "llm_relay.providers"):
        self.provider = provider_name
        self.categorize = categorize
        self.logger = logging.getLogger(f"{namespace}.{provider_name}")

    def _emit(self, level: int, message: str, **fields) -> None:
        if not self.logger.isEnabledFor(level):
            return
        parts = [f"provider={self.provider}"]
        parts.extend(f"{key}={value}" for key, value in fields.items() if value is not None)
        self.logger.log(level, "[%s] %s", " ".join(parts), message)

    @contextmanager
    def track_call(self, model: str) -> Iterator[str]:
        """
        Time one upstream call.

        Yields a short request id. A failure is logged with its status and
        category, then re-raised unchanged.
        """
        request_id = uuid.uuid4().hex[:8]
        started = time.perf_counter()
        self._emit(logging.DEBUG, "Calling upstream", model=model, request_id=request_id)

        try:
            yield request_id
        except Exception as e:
            self._emit(
                logging.ERROR,
                "Upstream call failed",
                model=model,
                request_id=request_id,
                duration_ms=_elapsed_ms(started),
                status=getattr(e, "status_code", None),
                category=self.categorize(e) if self.categorize else None,
                error_type=type(e).__name__,
                error_msg=str(e),
            )
            raise

        self._emit(
            logging.INFO,
            "Upstream call completed",
            model=model,
            request_id=request_id,
            duration_ms=_elapsed_ms(started),
        )
