"""Hydrogen-bond density in spherical shells around the origin."""

from __future__ import annotations

import math
from typing import Iterable

from hbondprofile.model import Frame
from hbondprofile.radial import HBondR


class HBondRvol(HBondR):
    """Bins every hydrogen bond between selection 1 and selection 2 by the
    distance of its hydrogen from the origin and reports the number of bonds
    per unit shell volume per frame.

    Takes the same arguments as :class:`HBondR`.
    """

    suffix = ".hbondrvol"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.n_frames = 0

    def _process_frame(self, frame: Frame) -> None:
        for _, bonds in self._bonds_by_molecule(frame):
            for bond in bonds:
                index = self._bin(math.sqrt(sum(c * c for c in bond.hydrogen)))
                self.slice_q[index] += 1
                self.slice_count[index] += 1

    def process(self, frames: Iterable[Frame]) -> None:
        """Accumulate bonds over every ``step``-th frame, writing after each.

        Densities are normalised by the total number of frames given.
        """
        frames = list(frames)
        self.n_frames = len(frames)
        super().process(frames)

    def profile(self) -> list[tuple[float, float]]:
        """Return (radius, bonds per volume per frame) for every bin."""
        rows = []
        for i, (q, count) in enumerate(zip(self.slice_q, self.slice_count)):
            r = (i + 0.5) * self.delta_r
            volume = 4.0 * math.pi * r * r * self.delta_r
            if count != 0 and volume != 0.0:
                rows.append((r, q / volume / self.n_frames))
            else:
                rows.append((r, 0.0))
        return rows

    def report(self) -> str:
        """Return the text of the output file."""
        return super().report()

    def write(self) -> None:
        """Write the report to the output file."""
        super().write()