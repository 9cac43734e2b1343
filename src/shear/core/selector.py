"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/selector.py
Selection policies for duplicate groups. No dependencies outside core.
A policy only orders the files of a group; Selector keeps the first
primary-root file of that order and reports every other file as redundant.
All orderings use a stable sort, so ties keep traversal order.
"""
from typing import List, Optional

from shear.core.interfaces import SelectionPolicy
from shear.core.models import DuplicateGroup, FileDescriptor, Selection, SortOrder


class LongestPathPolicy(SelectionPolicy):
    """
    Keeps the file with the longest path string.
    The outcome depends on how paths are spelled: absolute and relative
    roots can pick different files.
    """
    @staticmethod
    def order(files: List[FileDescriptor]) -> List[FileDescriptor]:
        return sorted(files, key=lambda f: -len(f.path))


class ShortestPathPolicy(SelectionPolicy):
    @staticmethod
    def order(files: List[FileDescriptor]) -> List[FileDescriptor]:
        return sorted(files, key=lambda f: len(f.path))


class NewestPolicy(SelectionPolicy):
    """Keeps the most recently modified file."""
    @staticmethod
    def order(files: List[FileDescriptor]) -> List[FileDescriptor]:
        return sorted(files, key=lambda f: -(f.modified_time or 0))


class OldestPolicy(SelectionPolicy):
    """Keeps the least recently modified file."""
    @staticmethod
    def order(files: List[FileDescriptor]) -> List[FileDescriptor]:
        return sorted(files, key=lambda f: f.modified_time or 0)


class FirstEncounteredPolicy(SelectionPolicy):
    @staticmethod
    def order(files: List[FileDescriptor]) -> List[FileDescriptor]:
        return list(files)


_POLICIES = {
    SortOrder.LONGEST_PATH: LongestPathPolicy,
    SortOrder.SHORTEST_PATH: ShortestPathPolicy,
    SortOrder.NEWEST: NewestPolicy,
    SortOrder.OLDEST: OldestPolicy,
    SortOrder.FIRST_ENCOUNTERED: FirstEncounteredPolicy,
}


def get_policy(sort_order: SortOrder) -> SelectionPolicy:
    try:
        return _POLICIES[sort_order]()
    except KeyError:
        raise ValueError(f"Unsupported sort order: {sort_order!r}")


class Selector:
    """
    Splits duplicate groups into one kept file and the redundant rest.
    Swapping the policy never touches grouping.
    """

    def __init__(self, policy: SelectionPolicy = None, sort_order: SortOrder = SortOrder.LONGEST_PATH):
        self.policy = policy or get_policy(sort_order)

    def select(self, group: DuplicateGroup) -> Optional[Selection]:
        """
        Returns None when the group has no primary-root file to keep
        (possible only in compare mode).
        """
        ordered = self.policy.order(group.files)
        kept = next((f for f in ordered if f.from_primary_root), None)
        if kept is None:
            return None
        redundant = [f for f in ordered if f is not kept]
        return Selection(group=group, kept=kept, redundant=redundant)

    def select_all(self, groups: List[DuplicateGroup]) -> List[Selection]:
        if not groups:
            return []
        selections = []
        for group in groups:
            selection = self.select(group)
            if selection is not None and selection.redundant:
                selections.append(selection)
        return selections
