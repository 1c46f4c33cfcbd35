"""Filter options domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FilterOptions:
    """Inputs of the departure filtering routine."""

    filter_destination: frozenset[str] = field(default_factory=frozenset)
    filter_first_stop: frozenset[str] = field(default_factory=frozenset)
    filter_cancelled: bool = False
    display_rows: int = 10

    def __post_init__(self) -> None:
        if self.display_rows < 1:
            raise ValueError("display_rows must be a positive integer")
