"""Box: the narrow capability interface a host supplies for each laid-out element."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..layout.geometry import ProposedSize, Size


# Valid axes for spacing queries
VALID_AXES = {"horizontal", "vertical"}

# Default spacing preferences
DEFAULT_HORIZONTAL_SPACING = 7.0
DEFAULT_VERTICAL_SPACING = 10.0


@dataclass(frozen=True)
class ViewSpacing:
    """Preferred distance a box keeps to its neighbours along each axis."""

    horizontal: float = DEFAULT_HORIZONTAL_SPACING
    vertical: float = DEFAULT_VERTICAL_SPACING

    def _along(self, axis: str) -> float:
        if axis == "horizontal":
            return self.horizontal
        if axis == "vertical":
            return self.vertical
        raise ValueError(
            f"Unknown axis '{axis}'. Use 'horizontal' or 'vertical'."
        )

    def distance(self, to: ViewSpacing, axis: str) -> float:
        """Negotiated distance to the next box: the larger of both preferences."""
        return max(self._along(axis), to._along(axis))

    def union(self, other: ViewSpacing, axes: frozenset[str] = frozenset(VALID_AXES)) -> ViewSpacing:
        """Return the per-axis max for the named axes, keeping self elsewhere."""
        unknown = set(axes) - VALID_AXES
        if unknown:
            raise ValueError(f"Unknown axes {sorted(unknown)}. Use {sorted(VALID_AXES)}.")
        return ViewSpacing(
            horizontal=(max(self.horizontal, other.horizontal)
                        if "horizontal" in axes else self.horizontal),
            vertical=(max(self.vertical, other.vertical)
                      if "vertical" in axes else self.vertical),
        )


class Box(ABC):
    """Base class for elements placed by a flow layout.

    The layout only ever reads a box: it asks for its size and its
    spacing preference, and never mutates it.
    """

    @property
    @abstractmethod
    def spacing(self) -> ViewSpacing:
        """Spacing preference towards neighbouring boxes."""
        ...

    @abstractmethod
    def size_that_fits(self, proposal: ProposedSize) -> Size:
        """Return the box size for a proposal.

        Flow layout always asks with an unspecified proposal, i.e. for
        the intrinsic size.
        """
        ...


@dataclass(frozen=True)
class SizedBox(Box):
    """A box with a fixed intrinsic size, whatever the proposal."""

    width: float
    height: float
    view_spacing: ViewSpacing = field(default_factory=ViewSpacing)

    @property
    def spacing(self) -> ViewSpacing:
        return self.view_spacing

    def size_that_fits(self, proposal: ProposedSize) -> Size:
        return Size(self.width, self.height)

    @classmethod
    def from_sizes(
        cls,
        sizes: list[tuple[float, float]],
        view_spacing: ViewSpacing | None = None,
    ) -> list[SizedBox]:
        """Build one box per (width, height) pair sharing a spacing preference."""
        view_spacing = view_spacing if view_spacing is not None else ViewSpacing()
        return [cls(float(w), float(h), view_spacing) for w, h in sizes]
