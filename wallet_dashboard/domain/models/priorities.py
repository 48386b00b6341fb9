"""Chain priority table used to rank wallet balances."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from wallet_dashboard.domain.constants import (
    DEFAULT_CHAIN_PRIORITIES,
    UNKNOWN_PRIORITY,
)


@dataclass(frozen=True)
class PriorityTable:
    """Immutable mapping of chain identifiers to display priorities.

    Lookups never fail: chains missing from the table resolve to
    UNKNOWN_PRIORITY, which ranks below every configured chain.
    """

    priorities: Mapping[str, int] = field(
        default_factory=lambda: DEFAULT_CHAIN_PRIORITIES
    )

    def __post_init__(self) -> None:
        checked: dict[str, int] = {}
        for chain, priority in dict(self.priorities).items():
            if not isinstance(chain, str) or not chain:
                raise ValueError(f"Invalid chain identifier: {chain!r}")
            if isinstance(priority, bool) or not isinstance(priority, int):
                raise ValueError(
                    f"Priority for {chain} must be an integer: {priority!r}"
                )
            if priority <= UNKNOWN_PRIORITY:
                raise ValueError(
                    f"Priority for {chain} must be greater than "
                    f"{UNKNOWN_PRIORITY}: {priority}"
                )
            checked[chain] = priority
        object.__setattr__(self, "priorities", MappingProxyType(checked))

    def priority_of(self, chain) -> int:
        """Return the priority for a chain.

        Args:
            chain: Chain identifier; any value is accepted.

        Returns:
            int: Configured priority, or UNKNOWN_PRIORITY for unknown chains.
        """
        if not isinstance(chain, str):
            return UNKNOWN_PRIORITY
        return self.priorities.get(chain, UNKNOWN_PRIORITY)

    def __contains__(self, chain) -> bool:
        return isinstance(chain, str) and chain in self.priorities

    def __len__(self) -> int:
        return len(self.priorities)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.priorities.items())))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PriorityTable):
            return NotImplemented
        return dict(self.priorities) == dict(other.priorities)


DEFAULT_PRIORITY_TABLE = PriorityTable()


def priority_of(
    chain,
    priorities: PriorityTable = DEFAULT_PRIORITY_TABLE,
) -> int:
    """Return the display priority of a chain in the given table."""
    return priorities.priority_of(chain)


__all__ = ["PriorityTable", "DEFAULT_PRIORITY_TABLE", "priority_of"]
