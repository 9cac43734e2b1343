from typing import List
from shear.core.models import Selection


class DuplicateService:
    @staticmethod
    def redundant_paths(selections: List[Selection]) -> List[str]:
        """
        Flattens selections into the list of paths a caller could remove.

        Args:
            selections (List[Selection]): Selections in report order.

        Returns:
            List[str]: Redundant paths, group by group, in policy order.
        """
        paths = []
        for selection in selections:
            paths.extend(selection.redundant_paths)
        return paths

    @staticmethod
    def reclaimable_bytes(selections: List[Selection]) -> int:
        """Calculate total space that would be freed by removing every redundant file."""
        return sum(selection.reclaimable_bytes for selection in selections)
