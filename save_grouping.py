#!/usr/bin/env python3
"""
Save Grouping

Buckets parsed save records per character and splits each bucket into
quick saves and auto saves. Unrecognized saves are left out.
"""

from dataclasses import dataclass, field
from typing import Iterable

from save_parser import SaveCategory, SaveRecord


@dataclass
class SaveGroup:
    """Saves of one character, split by category"""

    quick: list[SaveRecord] = field(default_factory=list)
    auto: list[SaveRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.quick) + len(self.auto)


GroupTable = dict[str, SaveGroup]


def add_to_group(table: GroupTable, record: SaveRecord) -> GroupTable:
    """Insert one record into the group of its character, creating it if needed"""
    group = table.setdefault(record.character_name, SaveGroup())

    if record.category is SaveCategory.QUICK:
        group.quick.append(record)
    elif record.category is SaveCategory.AUTO:
        group.auto.append(record)

    return table


def group_saves(records: Iterable[SaveRecord]) -> GroupTable:
    """Fold records into a table keyed by character name, keeping input order"""
    table: GroupTable = {}
    for record in records:
        add_to_group(table, record)
    return table


def sort_groups(table: GroupTable) -> GroupTable:
    """Sort every group newest first by sequence number, in place

    list.sort is stable, so saves sharing a sequence number keep their order.
    """
    for group in table.values():
        group.quick.sort(key=lambda r: r.sequence_number, reverse=True)
        group.auto.sort(key=lambda r: r.sequence_number, reverse=True)
    return table
