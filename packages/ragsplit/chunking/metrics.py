"""Performance monitoring for document splitting.

Tracks and logs how long each document takes to split and how many chunks it
produced.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class SplitMetrics:
    """Container for per-document split metrics."""

    doc_id: str
    input_chars: int
    output_chunks: int = 0
    duration_seconds: float = 0.0
    chunks_per_second: float = 0.0
    chars_per_chunk: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


class SplitPerformanceMonitor:
    """Monitor and log performance metrics for split operations."""

    def __init__(self, history_limit: int = 1000) -> None:
        self.metrics_history: deque[SplitMetrics] = deque(maxlen=history_limit)

    @contextmanager
    def measure(
        self,
        doc_id: str,
        text_length: int,
        metadata: dict[str, Any] | None = None,
    ) -> Iterator[SplitMetrics]:
        """Context manager to measure splitting of one document.

        Args:
            doc_id: Document identifier
            text_length: Length of input text in characters
            metadata: Additional metadata to track

        Yields:
            metrics: SplitMetrics object whose ``output_chunks`` the caller sets

        Example:
            with monitor.measure("doc123", len(text)) as metrics:
                chunks = splitter.split_text(text)
                metrics.output_chunks = len(chunks)
        """
        start_time = time.perf_counter()
        metrics = SplitMetrics(doc_id=doc_id, input_chars=text_length, metadata=metadata or {})

        try:
            yield metrics
        except Exception as e:
            metrics.error = str(e)
            raise
        finally:
            metrics.duration_seconds = time.perf_counter() - start_time

            if metrics.output_chunks > 0:
                metrics.chunks_per_second = metrics.output_chunks / max(metrics.duration_seconds, 0.001)
                metrics.chars_per_chunk = metrics.input_chars / metrics.output_chunks

            self._log_metrics(metrics)
            self.metrics_history.append(metrics)

    def _log_metrics(self, metrics: SplitMetrics) -> None:
        if metrics.error:
            logger.error("Split failed - Doc: %s, Error: %s", metrics.doc_id, metrics.error)
            return

        logger.debug(
            "Split performance - Doc: %s, Chars: %d, Chunks: %d, Duration: %.3fs, Avg size: %.0f chars/chunk",
            metrics.doc_id,
            metrics.input_chars,
            metrics.output_chunks,
            metrics.duration_seconds,
            metrics.chars_per_chunk,
        )

    def summary(self) -> dict[str, Any]:
        """Get aggregate statistics over the successful runs in history."""
        successful = [m for m in self.metrics_history if not m.error]

        if not successful:
            return {"no_data": True}

        total_chunks = sum(m.output_chunks for m in successful)
        total_time = sum(m.duration_seconds for m in successful)

        return {
            "total_documents": len(successful),
            "failed_documents": len(self.metrics_history) - len(successful),
            "total_chunks": total_chunks,
            "total_chars": sum(m.input_chars for m in successful),
            "total_time": total_time,
            "avg_chunks_per_second": total_chunks / max(total_time, 0.001),
        }

    def reset(self) -> None:
        self.metrics_history.clear()
