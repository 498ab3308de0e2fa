"""
Reduction of many per-pair rule results into one access decision.

Precedence:
    - A single deny anywhere vetoes the decision
    - Silence (no opinion) never grants access on its own
    - Access is granted only when at least one result allowed and no
      result denied
"""

from typing import Iterator

from aclcore.rule import RuleResult


class RuleResultCollection:
    """
    One-shot accumulator for the results of a single evaluation.

    Entries are RuleResult objects or None, one per (role name,
    resource name) pair tested. A None entry, like a RuleResult whose
    action is None, expresses no opinion.
    """

    def __init__(self) -> None:
        self._results: list[RuleResult | None] = []

    def add(self, result: RuleResult | None) -> None:
        self._results.append(result)

    def get(self) -> bool:
        """
        Reduce the collected results to a boolean decision.

        Returns:
            True only if some result allowed and none denied
        """
        allowed = False
        for result in self._results:
            if result is None or result.action is None:
                continue
            if result.action is False:
                return False
            allowed = True
        return allowed

    def any(self) -> bool:
        """Whether any collected result expressed an opinion."""
        return any(
            result is not None and result.action is not None
            for result in self._results
        )

    def has_deny(self) -> bool:
        """Whether any collected result denied access."""
        return any(
            result is not None and result.action is False
            for result in self._results
        )

    @property
    def results(self) -> tuple[RuleResult | None, ...]:
        return tuple(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[RuleResult | None]:
        return iter(self._results)

    def __repr__(self) -> str:
        return f"<RuleResultCollection: {len(self._results)} results, allowed={self.get()}>"
