"""
Splits expedition (party) records into internal and external lists.

Entries are (display number, record) pairs. Display numbers are dense and
1-based within each list, independent of the record's source position.
"""

import logging
from typing import NamedTuple, Optional

from .errors import ClassificationError
from .models import PartyRecord, PartyType

logger = logging.getLogger(__name__)

Entry = tuple[int, PartyRecord]


class Partition(NamedTuple):
    internal: list[Entry]
    external: list[Entry]

    def for_type(self, party_type: PartyType) -> list[Entry]:
        return self.internal if party_type == PartyType.INTERNAL else self.external


def party_type(record: PartyRecord, position: Optional[int] = None) -> PartyType:
    try:
        return PartyType(record.type)
    except ValueError as exc:
        raise ClassificationError(record.type, position) from exc


def _known(records):
    """Yield (record, type) for recognized records, logging the rest."""
    for position, record in enumerate(records):
        try:
            kind = party_type(record, position)
        except ClassificationError as exc:
            logger.warning("Dropping expedition record %r: %s", record.name, exc)
            continue
        yield record, kind


def classify(records) -> Partition:
    internal: list[Entry] = []
    external: list[Entry] = []
    for record, kind in _known(records):
        target = internal if kind == PartyType.INTERNAL else external
        target.append((len(target) + 1, record))
    return Partition(internal, external)


def select(records, party: PartyType, separate: bool) -> list[Entry]:
    """Entries to print in one party table.

    separate=True returns the partition for *party*. separate=False returns
    every recognized record in source order, numbered over the combined list.
    """
    if separate:
        return classify(records).for_type(party)
    return [(i, record) for i, (record, _) in enumerate(_known(records), 1)]
