"""Average hydrogen-bond count per molecule as a function of radius."""

from __future__ import annotations

import itertools
import math
from typing import Iterable, Iterator, Optional

from hbondprofile.model import Frame, Molecule, Selection, find_hbonds, output_path


def _fmt(value: float) -> str:
    return f"{value:g}"


class _Analyser:
    """Shared state and output handling for the binned hydrogen-bond analyses."""

    suffix = ""

    def __init__(
        self,
        filename: str,
        sele1: str,
        sele2: str,
        r_cut: float,
        theta_cut: float,
        nbins: int,
        step: int,
        output_filename: Optional[str],
    ) -> None:
        if nbins <= 0:
            raise ValueError("number of bins must be positive")
        if step <= 0:
            raise ValueError("step must be positive")
        self.selection1 = Selection(sele1)
        self.selection2 = Selection(sele2)
        self.r_cut = r_cut
        self.theta_cut = theta_cut
        self.nbins = nbins
        self.step = step
        self.output_filename = output_filename or output_path(filename, self.suffix)
        self.slice_q = [0.0] * nbins
        self.slice_count = [0] * nbins

    def _frames(self, frames: Iterable[Frame]) -> Iterator[Frame]:
        return itertools.islice(frames, 0, None, self.step)

    def _bonds_by_molecule(self, frame: Frame) -> Iterator[tuple[Molecule, list]]:
        """Yield each molecule of selection 1 with its bonds to selection 2."""
        partners = self.selection2.select(frame)
        for mol1 in self.selection1.select(frame):
            bonds = [
                bond
                for mol2 in partners
                for bond in find_hbonds(mol1, mol2, frame, self.r_cut, self.theta_cut)
            ]
            yield mol1, bonds

    def profile(self) -> list[tuple[float, float]]:
        return []

    def _render(self, header: list[str]) -> str:
        lines = list(header)
        lines.extend(f"{_fmt(a)}\t{_fmt(b)}" for a, b in self.profile())
        return "\n".join(lines) + "\n"

    def write(self) -> None:
        """Write the report to the output file."""
        try:
            with open(self.output_filename, "w", encoding="utf-8") as stream:
                stream.write(self.report())
        except OSError as exc:
            raise OSError(
                f"{type(self).__name__}: unable to open {self.output_filename}"
            ) from exc

    def report(self) -> str:
        return self._render([])


class HBondR(_Analyser):
    """Bins molecules of selection 1 by distance of their centre of mass from
    the origin and averages the hydrogen bonds they form with selection 2."""

    suffix = ".hbondr"

    def __init__(
        self,
        filename: str,
        sele1: str,
        sele2: str,
        sele3: str,
        r_cut: float,
        length: float,
        theta_cut: float,
        nbins: int,
        *,
        step: int = 1,
        analysis_type: str = "",
        param_string: str = "",
        output_filename: Optional[str] = None,
    ) -> None:
        super().__init__(
            filename, sele1, sele2, r_cut, theta_cut, nbins, step, output_filename
        )
        self.selection3 = Selection(sele3)
        self.length = length
        self.delta_r = length / nbins
        self.analysis_type = analysis_type
        self.param_string = param_string

    def _bin(self, r: float) -> int:
        index = int(r / self.delta_r)
        if not 0 <= index < self.nbins:
            raise ValueError(f"radius {r} lies outside the binned range 0..{self.length}")
        return index

    def _process_frame(self, frame: Frame) -> None:
        for mol1, bonds in self._bonds_by_molecule(frame):
            index = self._bin(math.sqrt(sum(c * c for c in mol1.com)))
            self.slice_q[index] += len(bonds)
            self.slice_count[index] += 1

    def process(self, frames: Iterable[Frame]) -> None:
        """Accumulate statistics over every ``step``-th frame, writing after each."""
        for frame in self._frames(frames):
            self._process_frame(frame)
            self.write()

    def profile(self) -> list[tuple[float, float]]:
        """Return (radius, mean bonds per molecule) for every occupied bin."""
        return [
            ((i + 0.5) * self.delta_r, q / count)
            for i, (q, count) in enumerate(zip(self.slice_q, self.slice_count))
            if count != 0
        ]

    def report(self) -> str:
        """Return the text of the output file."""
        header = [
            f"# {self.analysis_type}",
            f"#selection 1: ({self.selection1.script})",
            f"#selection 2: ({self.selection2.script})",
            f"#selection 3: ({self.selection3.script})",
        ]
        if self.param_string:
            header.append(f"# parameters: {self.param_string}")
        header.append("#distance\tH Bonds")
        return self._render(header)

    def write(self) -> None:
        """Write the report to the output file."""
        super().write()