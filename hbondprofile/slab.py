"""Average hydrogen-bond count per molecule in slabs along a box axis."""

from __future__ import annotations

from typing import Iterable, Optional

from hbondprofile.model import Frame
from hbondprofile.radial import _Analyser

_AXIS_LABELS = {0: "x", 1: "y", 2: "z"}


class HBondZ(_Analyser):
    """Bins molecules of selection 1 by the position of their centre of mass
    along one box axis and averages the hydrogen bonds they form with
    selection 2."""

    suffix = ".hbondz"
    column_title = "Hydrogen Bonds"

    def __init__(
        self,
        filename: str,
        sele1: str,
        sele2: str,
        r_cut: float,
        theta_cut: float,
        nbins: int,
        axis: int = 2,
        *,
        step: int = 1,
        output_filename: Optional[str] = None,
    ) -> None:
        super().__init__(
            filename, sele1, sele2, r_cut, theta_cut, nbins, step, output_filename
        )
        if axis not in _AXIS_LABELS:
            raise ValueError(f"axis must be 0, 1 or 2, not {axis}")
        self.axis = axis
        self.axis_label = _AXIS_LABELS[axis]
        self.box_lengths: list[float] = []

    def _bin(self, position: float, box: float) -> int:
        index = int(self.nbins * (box / 2.0 + position) / box)
        if not 0 <= index < self.nbins:
            raise ValueError(
                f"{self.axis_label} = {position} lies outside the box of length {box}"
            )
        return index

    def _record(self, index: int, frame: Frame) -> None:
        """Hook called for each molecule once it has been binned."""

    def _process_frame(self, frame: Frame) -> None:
        box = frame.box_length(self.axis)
        self.box_lengths.append(box)
        for mol1, bonds in self._bonds_by_molecule(frame):
            com = frame.wrap_vector(mol1.com) if frame.periodic else mol1.com
            index = self._bin(com[self.axis], box)
            self.slice_q[index] += len(bonds)
            self.slice_count[index] += 1
            self._record(index, frame)

    def process(self, frames: Iterable[Frame]) -> None:
        """Accumulate statistics over every ``step``-th frame, then write."""
        for frame in self._frames(frames):
            self._process_frame(frame)
        self.write()

    def _centres(self) -> list[float]:
        if self.box_lengths:
            average = sum(self.box_lengths) / len(self.box_lengths)
        else:
            average = float("nan")
        return [average * (i + 0.5) / self.nbins for i in range(self.nbins)]

    def profile(self) -> list[tuple[float, float]]:
        """Return (coordinate, mean bonds per molecule) for every bin."""
        return [
            (z, q / count if count != 0 else 0.0)
            for z, q, count in zip(self._centres(), self.slice_q, self.slice_count)
        ]

    def report(self) -> str:
        """Return the text of the output file."""
        return self._render(
            [
                f"#Hydrogen Bonds ({self.axis_label})",
                f"#nFrames:\t{len(self.box_lengths)}",
                f"#selection 1: ({self.selection1.script})",
                f"#selection 2: ({self.selection2.script})",
                f"#{self.axis_label}\t{self.column_title}",
            ]
        )

    def write(self) -> None:
        """Write the report to the output file."""
        super().write()