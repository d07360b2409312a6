"""Delivery result aggregation.

Collects per-target outcomes, in the order targets were processed, into a
single DeliveryReport. Counts are plain tallies; deciding whether a
partially successful call is good enough is left to the caller.
"""

from typing import Iterable, List

from infrastructure.notifications.models import (
    DeliveryMode,
    DeliveryOutcome,
    DeliveryReport,
)


class ResultAggregator:
    """Accumulates outcomes for one dispatch call.

    Example:
        aggregator = ResultAggregator(DeliveryMode.DIRECT)
        for recipient_id in recipient_ids:
            aggregator.record(await channel.deliver(message, recipient_id))
        report = aggregator.build()
    """

    def __init__(self, mode: DeliveryMode = DeliveryMode.DIRECT):
        self.mode = mode
        self._outcomes: List[DeliveryOutcome] = []

    def record(self, outcome: DeliveryOutcome) -> None:
        self._outcomes.append(outcome)

    def __len__(self) -> int:
        return len(self._outcomes)

    def build(self) -> DeliveryReport:
        return DeliveryReport(mode=self.mode, outcomes=list(self._outcomes))


def aggregate(
    outcomes: Iterable[DeliveryOutcome], mode: DeliveryMode = DeliveryMode.DIRECT
) -> DeliveryReport:
    """Fold a sequence of outcomes into a DeliveryReport."""
    aggregator = ResultAggregator(mode)
    for outcome in outcomes:
        aggregator.record(outcome)
    return aggregator.build()
