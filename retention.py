#!/usr/bin/env python3
"""
Retention Selection

Keeps the newest N saves per character and category and selects the rest
for deletion.
"""

from dataclasses import dataclass, field
from typing import Iterable

from save_grouping import GroupTable, group_saves, sort_groups
from save_parser import SaveRecord


@dataclass
class RetentionPlan:
    """Sorted groups together with the saves selected for deletion"""

    groups: GroupTable
    saves_to_preserve: int
    candidates: list[SaveRecord] = field(default_factory=list)

    @property
    def kept_count(self) -> int:
        return sum(group.count for group in self.groups.values()) - len(self.candidates)


def deletable_saves(saves: list[SaveRecord], saves_to_preserve: int) -> list[SaveRecord]:
    """Everything after the first ``saves_to_preserve`` entries of a sorted list"""
    if saves_to_preserve < 0:
        raise ValueError(f"saves_to_preserve must not be negative, got {saves_to_preserve}")
    return saves[saves_to_preserve:]


def select_for_deletion(table: GroupTable, saves_to_preserve: int) -> list[SaveRecord]:
    """Collect deletion candidates from a sorted group table

    Quick and auto saves are counted separately for every character. Each
    character contributes its quick candidates before its auto candidates.

    Args:
        table: Groups sorted newest first (see sort_groups)
        saves_to_preserve: Newest saves to keep per character and category

    Returns:
        Saves to delete, oldest of each list last
    """
    candidates: list[SaveRecord] = []
    for group in table.values():
        candidates.extend(deletable_saves(group.quick, saves_to_preserve))
        candidates.extend(deletable_saves(group.auto, saves_to_preserve))
    return candidates


def plan_deletion(records: Iterable[SaveRecord], saves_to_preserve: int) -> RetentionPlan:
    """Group, sort and select in one step"""
    table = sort_groups(group_saves(records))
    return RetentionPlan(
        groups=table,
        saves_to_preserve=saves_to_preserve,
        candidates=select_for_deletion(table, saves_to_preserve),
    )
