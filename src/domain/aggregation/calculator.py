"""Per-team running averages of one ranking statistic."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from math import isfinite
from typing import Any

from domain.common import RawRecord, StatSelection, normalize_team_id
from domain.errors import EmptyInputError, MalformedRecordError
from domain.protocol import AveragingMode


@dataclass
class TeamAggregate:
    team_id: str
    average: float
    records_seen: int
    first_seen: int


@dataclass(frozen=True)
class SkippedRecord:
    record_index: int
    reason: str


@dataclass(frozen=True)
class FoldResult:
    """Outcome of folding one complete record sequence."""

    averages: dict[str, float]
    folded_records: int
    skipped: tuple[SkippedRecord, ...] = field(default=())

    @property
    def skipped_records(self) -> int:
        return len(self.skipped)


def _parse_number(record: RawRecord, index: int, label: str, record_index: int | None) -> float:
    raw_value: Any = record[index]
    try:
        value = float(raw_value)
    except (TypeError, ValueError) as exc:
        raise MalformedRecordError(
            f"{label} field {index} is not numeric: {raw_value!r}",
            record_index=record_index,
        ) from exc
    if not isfinite(value):
        raise MalformedRecordError(
            f"{label} field {index} is not finite: {raw_value!r}",
            record_index=record_index,
        )
    return value


class StatAverageCalculator:
    """Stateful record-by-record per-match stat averager."""

    def __init__(
        self,
        selection: StatSelection,
        *,
        averaging: AveragingMode = AveragingMode.INCREMENTAL,
    ) -> None:
        self.selection = selection
        self.averaging = AveragingMode(averaging)
        self._aggregates: dict[str, TeamAggregate] = {}

    def tracked_team_count(self) -> int:
        return len(self._aggregates)

    def get_aggregate(self, team_id: Any) -> TeamAggregate | None:
        return self._aggregates.get(normalize_team_id(team_id))

    def averages(self) -> dict[str, float]:
        """Return a snapshot of current averages in first-seen order."""
        return {team_id: aggregate.average for team_id, aggregate in self._aggregates.items()}

    def normalized_value(self, record: RawRecord, *, record_index: int | None = None) -> float:
        """Per-match rate of the selected statistic for one record."""
        if len(record) < self.selection.required_length:
            raise MalformedRecordError(
                f"record has {len(record)} fields, "
                f"needs at least {self.selection.required_length}",
                record_index=record_index,
            )

        stat_value = _parse_number(record, self.selection.stat_index, "stat", record_index)
        match_count = _parse_number(
            record, self.selection.match_count_index, "match count", record_index
        )
        if match_count == 0.0:
            raise MalformedRecordError("match count is zero", record_index=record_index)
        return stat_value / match_count

    def process_record(self, record: RawRecord, *, record_index: int | None = None) -> TeamAggregate:
        normalized = self.normalized_value(record, record_index=record_index)
        team_id = normalize_team_id(record[self.selection.team_index])
        if not team_id:
            raise MalformedRecordError("team id is empty", record_index=record_index)

        aggregate = self._aggregates.get(team_id)
        if aggregate is None:
            aggregate = TeamAggregate(
                team_id=team_id,
                average=normalized,
                records_seen=1,
                first_seen=len(self._aggregates),
            )
            self._aggregates[team_id] = aggregate
            return aggregate

        if self.averaging is AveragingMode.LEGACY:
            # Historical output: a zero average counts as unseen and restarts the
            # team; otherwise the pair sum is re-divided by the full count.
            if aggregate.average == 0.0:
                aggregate.records_seen = 1
                aggregate.average = normalized
                return aggregate
            aggregate.records_seen += 1
            aggregate.average = (aggregate.average + normalized) / aggregate.records_seen
            return aggregate

        aggregate.records_seen += 1
        aggregate.average += (normalized - aggregate.average) / aggregate.records_seen
        return aggregate


def fold_records(
    records: Iterable[RawRecord],
    selection: StatSelection,
    *,
    averaging: AveragingMode = AveragingMode.INCREMENTAL,
) -> FoldResult:
    """Fold raw records into one average per team, skipping malformed rows."""
    calculator = StatAverageCalculator(selection, averaging=averaging)
    skipped: list[SkippedRecord] = []
    folded = 0

    for index, record in enumerate(records):
        try:
            calculator.process_record(record, record_index=index)
        except MalformedRecordError as exc:
            skipped.append(SkippedRecord(record_index=index, reason=str(exc)))
            continue
        folded += 1

    if folded == 0:
        raise EmptyInputError(
            f"no foldable ranking records (skipped={len(skipped)})"
        )

    return FoldResult(
        averages=calculator.averages(),
        folded_records=folded,
        skipped=tuple(skipped),
    )
