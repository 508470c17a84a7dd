"""Hydrogen-bond density in slabs along a box axis."""

from __future__ import annotations

from typing import Iterable

from hbondprofile.model import Frame
from hbondprofile.slab import HBondZ


class HBondZvol(HBondZ):
    """Bins molecules of selection 1 by the position of their centre of mass
    along one box axis and reports the hydrogen bonds they form with
    selection 2 per unit slab volume per frame.

    Takes the same arguments as :class:`HBondZ`.
    """

    suffix = ".hbondzvol"
    column_title = "Hydrogen Bond Density (molecules/A^3)"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.volumes = [0.0] * self.nbins
        self.n_frames = 0

    def _record(self, index: int, frame: Frame) -> None:
        self.volumes[index] = (
            frame.box_length(0) * frame.box_length(1) * frame.box_length(2)
        ) / self.nbins

    def process(self, frames: Iterable[Frame]) -> None:
        """Accumulate statistics over every ``step``-th frame, then write.

        Densities are normalised by the total number of frames given.
        """
        frames = list(frames)
        self.n_frames = len(frames)
        super().process(frames)

    def profile(self) -> list[tuple[float, float]]:
        """Return (coordinate, bonds per volume per frame) for every bin."""
        return [
            (z, q / volume / self.n_frames if count != 0 else 0.0)
            for z, q, count, volume in zip(
                self._centres(), self.slice_q, self.slice_count, self.volumes
            )
        ]

    def report(self) -> str:
        """Return the text of the output file."""
        return super().report()

    def write(self) -> None:
        """Write the report to the output file."""
        super().write()