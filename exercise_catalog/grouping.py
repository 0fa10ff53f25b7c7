from typing import Dict, List, NamedTuple

import pandas as pd

from .models import Exercise, Target


class GroupedView(NamedTuple):
    groups: Dict[str, List[Exercise]]
    order: List[str]


def index_by_group(exercises, preferred_order=()):
    """
    Indexes exercises by muscle group for display.

    An exercise is listed once under every distinct group it targets. Each
    group's list is sorted by name (code point order). The visible order is
    the preferred groups that have members, followed by any other group in
    the order it was first seen. Empty groups are left out.

    Returns a new GroupedView on every call; the input is never modified.
    """
    # Seed with the preferred groups so they keep their slot ahead of extras
    by_group = {g: [] for g in preferred_order}
    for exercise in exercises:
        for group in dict.fromkeys(t.group for t in exercise.targets):
            by_group.setdefault(group, []).append(exercise)

    order = [g for g, items in by_group.items() if items]
    groups = {g: sorted(by_group[g], key=lambda e: e.name) for g in order}
    return GroupedView(groups, order)


def targets_for_group(exercise, group) -> List[Target]:
    """Targets of one exercise under a single group heading, in source order."""
    return [t for t in exercise.targets if t.group == group]


def catalog_frame(exercises):
    """
    Long-form DataFrame with one row per (exercise, target).

    Exercises without targets still get a row, with empty group and subregion.
    """
    rows = []
    for exercise in exercises:
        if not exercise.targets:
            rows.append({'exercise': exercise.name, 'group': '', 'subregion': ''})
            continue
        for t in exercise.targets:
            rows.append({'exercise': exercise.name, 'group': t.group, 'subregion': t.subregion})
    return pd.DataFrame(rows, columns=['exercise', 'group', 'subregion'])
