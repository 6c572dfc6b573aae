"""Log aggregation and formatting for worker log streams."""

import math
from dataclasses import dataclass
from typing import Any, Iterable, Literal

from pydantic import ValidationError

from tdremote.core.exceptions import MalformedResponseError
from tdremote.models.logs import LogLevel, LogMessage, WorkerLog

Severity = Literal["error", "warning", "info", "debug", "noisy"]

MORE_OUTPUT_MARKER = "... use less to see more ..."
WORKER_HEADER_PREFIX = "---------"
DEFAULT_LIMIT = 30


def classify(level: int) -> Severity:
    """Map a numeric level onto its severity bucket."""
    if level <= LogLevel.ERROR:
        return "error"
    elif level <= LogLevel.WARNING:
        return "warning"
    elif level <= LogLevel.INFO:
        return "info"
    elif level <= LogLevel.DEBUG:
        return "debug"
    return "noisy"


@dataclass(frozen=True)
class LogLine:
    """One display line; severity is None for headers and markers."""

    text: str
    severity: Severity | None = None


def _format_number(value: float | str) -> str:
    if isinstance(value, (int, float)) and float(value).is_integer():
        return str(int(value))
    return str(value)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_message(record: LogMessage, elide_category: str | None = None) -> str:
    """Render a record as ``[elapsed> ][category: ]msg[ [ctx: Nms]]``."""
    text = record.msg
    meta = record.meta
    if meta is not None and meta.context_id:
        duration = _round_half_up(meta.context_duration or 0)
        text += f" [{meta.context_id}: {duration}ms]"

    prefix = ""
    if record.elapsed:
        prefix += _format_number(record.elapsed) + "> "
    if record.category and record.category != elide_category:
        prefix += record.category + ": "
    return prefix + text


def _coerce_records(records: Iterable[Any]) -> list[LogMessage]:
    result = []
    for record in records:
        if record is None:
            continue
        if isinstance(record, LogMessage):
            result.append(record)
            continue
        try:
            result.append(LogMessage.model_validate(record))
        except ValidationError as exc:
            raise MalformedResponseError(f"bad log record: {exc}") from exc
    return result


class LogAggregator:
    """Turns raw worker log records into ordered, classified display lines.

    When ``interactive`` is set, each rendered block stops after ``limit``
    lines and ends with a single marker line.
    """

    def __init__(self, interactive: bool = False, limit: int = DEFAULT_LIMIT):
        self.interactive = interactive
        self.limit = limit

    def render_entries(
        self,
        records: Iterable[Any],
        elide_category: str | None = None,
    ) -> list[LogLine]:
        lines = [
            LogLine(format_message(r, elide_category), classify(r.level))
            for r in _coerce_records(records)
        ]
        return self._truncate(lines)

    def render(
        self,
        records: Iterable[Any],
        elide_category: str | None = None,
    ) -> list[str]:
        """Plain-text variant of ``render_entries``."""
        return [line.text for line in self.render_entries(records, elide_category)]

    def render_worker_entries(
        self,
        workers: Iterable[Any],
        merge: bool = False,
    ) -> list[LogLine]:
        """Render per-worker blocks, or one chronological view when ``merge`` is set."""
        parsed = []
        for w in workers:
            try:
                parsed.append(w if isinstance(w, WorkerLog) else WorkerLog.model_validate(w))
            except ValidationError as exc:
                raise MalformedResponseError(f"bad worker log block: {exc}") from exc

        if merge:
            return self._merge(parsed)

        lines: list[LogLine] = []
        for w in parsed:
            lines.append(LogLine(f"{WORKER_HEADER_PREFIX} {w.worker}"))
            if w.body.applog:
                lines.extend(self.render_entries(w.body.applog))
        return lines

    def render_workers(self, workers: Iterable[Any], merge: bool = False) -> list[str]:
        return [line.text for line in self.render_worker_entries(workers, merge)]

    def _merge(self, workers: list[WorkerLog]) -> list[LogLine]:
        tagged = []
        for w in workers:
            for r in _coerce_records(w.body.applog or []):
                tagged.append((w.worker, r))
        # Records without a timestamp keep their relative order at the end.
        tagged.sort(key=lambda item: (item[1].timestamp is None, item[1].timestamp or 0))
        lines = [
            LogLine(f"{worker}| {format_message(r)}", classify(r.level))
            for worker, r in tagged
        ]
        return self._truncate(lines)

    def _truncate(self, lines: list[LogLine]) -> list[LogLine]:
        if not self.interactive or len(lines) <= self.limit:
            return lines
        return lines[: self.limit] + [LogLine(MORE_OUTPUT_MARKER)]
