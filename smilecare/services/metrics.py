"""CloudWatch custom metrics for receptionist turns.

Each chat turn reports a request count, its latency, the reply rule that
fired and one count per appointment field it filled in.

* Enabled with ``METRICS_ENABLED=true``: points are buffered and a daemon
  thread pushes them to CloudWatch every ``FLUSH_INTERVAL_SECONDS``.
* Disabled (the default): points are logged at DEBUG and dropped, so
  nothing accumulates in memory.

Usage
-----
>>> from smilecare.services.metrics import metrics
>>> metrics.record_success("receptionist", "chat_turn", latency_ms=1.2)
>>> metrics.record_count("Chat/FieldExtracted", {"Field": "phone"})
>>> metrics.record_failure("receptionist", "chat_turn", error_type="KeyError")
"""

from __future__ import annotations

import atexit
import logging
import os
import threading
import time
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)

NAMESPACE = "SmileCare"
FLUSH_INTERVAL_SECONDS = 60
MAX_BATCH_SIZE = 1_000  # CloudWatch API limit per PutMetricData call


class MetricsClient:
    """Batched CloudWatch metrics publisher."""

    def __init__(self) -> None:
        self._enabled = os.getenv("METRICS_ENABLED", "false").lower() == "true"
        self._buffer: list[dict[str, Any]] = []
        self._lock = threading.Lock()
        self._cw_client = None  # lazy-init

        if self._enabled:
            self._start_flush_thread()

    def _get_cw_client(self):
        """Create the boto3 CloudWatch client on first use."""
        if self._cw_client is None:
            import boto3

            self._cw_client = boto3.client("cloudwatch")
        return self._cw_client

    # ── Public API ────────────────────────────────────────────────────

    def record_success(self, component: str, operation: str, latency_ms: float) -> None:
        """Record a handled turn and how long it took."""
        self._put("Chat/RequestCount", {"Component": component, "Status": "success"})
        self._put(
            "Chat/Latency",
            {"Component": component, "Operation": operation},
            value=latency_ms,
            unit="Milliseconds",
        )

    def record_failure(self, component: str, operation: str, error_type: str) -> None:
        """Record a turn that raised."""
        self._put("Chat/RequestCount", {"Component": component, "Status": "failure"})
        self._put(
            "Chat/ErrorCount",
            {"Component": component, "Operation": operation, "ErrorType": error_type},
        )

    def record_count(self, metric_name: str, dimensions: dict[str, str]) -> None:
        """Record a single occurrence of *metric_name*."""
        self._put(metric_name, dimensions)

    def flush(self) -> int:
        """Send buffered metrics to CloudWatch.  Returns count sent."""
        with self._lock:
            if not self._buffer:
                return 0
            batch = self._buffer[:]
            self._buffer.clear()

        sent = 0
        try:
            cw = self._get_cw_client()
            for i in range(0, len(batch), MAX_BATCH_SIZE):
                chunk = batch[i : i + MAX_BATCH_SIZE]
                cw.put_metric_data(Namespace=NAMESPACE, MetricData=chunk)
                sent += len(chunk)
            logger.info("Flushed %d metrics to CloudWatch", sent)
        except Exception:
            logger.exception("Failed to flush metrics to CloudWatch")
        return sent

    # ── Internal ──────────────────────────────────────────────────────

    def _put(
        self,
        metric_name: str,
        dimensions: dict[str, str],
        value: float = 1,
        unit: str = "Count",
    ) -> None:
        logger.debug("Metric: %s %s value=%s", metric_name, dimensions, value)
        if not self._enabled:
            return
        point = {
            "MetricName": metric_name,
            "Dimensions": [{"Name": k, "Value": v} for k, v in dimensions.items()],
            "Timestamp": datetime.now(UTC),
            "Value": value,
            "Unit": unit,
        }
        with self._lock:
            self._buffer.append(point)

    def _start_flush_thread(self) -> None:
        """Start a daemon thread that flushes metrics periodically."""

        def _loop():
            while True:
                time.sleep(FLUSH_INTERVAL_SECONDS)
                self.flush()

        t = threading.Thread(target=_loop, daemon=True, name="metrics-flush")
        t.start()
        atexit.register(self.flush)
        logger.info(
            "Metrics flush thread started (interval=%ds)", FLUSH_INTERVAL_SECONDS,
        )


# ── Module-level singleton ──────────────────────────────────────────
metrics = MetricsClient()
