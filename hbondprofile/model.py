"""Trajectory frames, molecules, selections and the hydrogen-bond criterion."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Optional, Sequence, Tuple

Vector = Tuple[float, float, float]
Matrix = Tuple[Vector, Vector, Vector]


def _vec(values: Sequence[float]) -> Vector:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def _sub(a: Vector, b: Vector) -> Vector:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _norm(a: Vector) -> float:
    return math.sqrt(_dot(a, a))


def _round_half_away(x: float) -> float:
    return math.floor(x + 0.5) if x >= 0.0 else math.ceil(x - 0.5)


def _mat_vec(m: Matrix, v: Vector) -> Vector:
    return (_dot(m[0], v), _dot(m[1], v), _dot(m[2], v))


def _inverse(m: Matrix) -> Matrix:
    (a, b, c), (d, e, f), (g, h, i) = m
    det = a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)
    if det == 0.0:
        raise ValueError("box matrix is singular")
    return (
        ((e * i - f * h) / det, (c * h - b * i) / det, (b * f - c * e) / det),
        ((f * g - d * i) / det, (a * i - c * g) / det, (c * d - a * f) / det),
        ((d * h - e * g) / det, (b * g - a * h) / det, (a * e - b * d) / det),
    )


@dataclass(frozen=True)
class HBondDonor:
    """A donor atom position together with the hydrogen it donates."""

    donor: Vector
    hydrogen: Vector

    def __post_init__(self) -> None:
        object.__setattr__(self, "donor", _vec(self.donor))
        object.__setattr__(self, "hydrogen", _vec(self.hydrogen))


@dataclass
class Molecule:
    """A molecule with its centre of mass, donors and acceptor positions."""

    name: str = ""
    com: Vector = (0.0, 0.0, 0.0)
    donors: list[HBondDonor] = field(default_factory=list)
    acceptors: list[Vector] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.com = _vec(self.com)
        self.acceptors = [_vec(a) for a in self.acceptors]


@dataclass
class Frame:
    """One trajectory snapshot: the box matrix and the molecules in it."""

    hmat: Matrix
    molecules: list[Molecule] = field(default_factory=list)
    periodic: bool = True
    _inv: Matrix = field(init=False, repr=False, compare=False)
    _ortho: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        rows = [tuple(float(v) for v in row) for row in self.hmat]
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("box matrix must be 3x3")
        self.hmat = (rows[0], rows[1], rows[2])  # type: ignore[assignment]
        self._inv = _inverse(self.hmat)
        self._ortho = all(
            self.hmat[r][c] == 0.0 for r in range(3) for c in range(3) if r != c
        )

    def box_length(self, axis: int) -> float:
        """Return the diagonal box element along ``axis`` (0, 1 or 2)."""
        return self.hmat[axis][axis]

    def wrap_vector(self, vector: Sequence[float]) -> Vector:
        """Return the minimum-image equivalent of ``vector``."""
        v = _vec(vector)
        if self._ortho:
            wrapped = []
            for axis, component in enumerate(v):
                scaled = component * self._inv[axis][axis]
                scaled -= _round_half_away(scaled)
                wrapped.append(scaled * self.hmat[axis][axis])
            return _vec(wrapped)
        scaled = _mat_vec(self._inv, v)
        scaled = _vec(s - _round_half_away(s) for s in scaled)
        return _mat_vec(self.hmat, scaled)


@dataclass
class Selection:
    """Chooses molecules from a frame.

    Without a predicate the script is a list of molecule names separated by
    whitespace; the word ``all`` selects every molecule.
    """

    script: str
    predicate: Optional[Callable[[Molecule], bool]] = None

    def _matches(self, molecule: Molecule) -> bool:
        if self.predicate is not None:
            return self.predicate(molecule)
        names = self.script.split()
        return "all" in names or molecule.name in names

    def select(self, frame: Frame) -> list[Molecule]:
        """Return the selected molecules of ``frame`` in frame order."""
        return [m for m in frame.molecules if self._matches(m)]


class Role(Enum):
    """The part the first molecule plays in a hydrogen bond."""

    DONOR = "donor"
    ACCEPTOR = "acceptor"


@dataclass(frozen=True)
class HBond:
    """A hydrogen bond found between two molecules."""

    role: Role
    donor: Vector
    hydrogen: Vector
    acceptor: Vector
    distance: float
    angle: float


def _angle(dh: Vector, da: Vector, dh_dist: float, da_dist: float) -> Optional[float]:
    denom = dh_dist * da_dist
    if denom == 0.0:
        return None
    cosine = _dot(dh, da) / denom
    if not -1.0 <= cosine <= 1.0:
        return None
    return math.acos(cosine) * 180.0 / math.pi


def find_hbonds(
    mol1: Molecule, mol2: Molecule, frame: Frame, r_cut: float, theta_cut: float
) -> Iterator[HBond]:
    """Yield hydrogen bonds between ``mol1`` and ``mol2``.

    Bonds where ``mol1`` donates come first, then those where it accepts.
    A bond needs a donor-acceptor distance below ``r_cut`` and an angle
    between the D-H and D-A vectors below ``theta_cut`` degrees.
    """
    for hbd in mol1.donors:
        dh = frame.wrap_vector(_sub(hbd.hydrogen, hbd.donor))
        dh_dist = _norm(dh)
        for acceptor in mol2.acceptors:
            da = frame.wrap_vector(_sub(acceptor, hbd.donor))
            da_dist = _norm(da)
            if da_dist < r_cut:
                theta = _angle(dh, da, dh_dist, da_dist)
                if theta is not None and theta < theta_cut:
                    yield HBond(Role.DONOR, hbd.donor, hbd.hydrogen, acceptor, da_dist, theta)

    for acceptor in mol1.acceptors:
        for hbd in mol2.donors:
            da = frame.wrap_vector(_sub(acceptor, hbd.donor))
            da_dist = _norm(da)
            if da_dist < r_cut:
                dh = frame.wrap_vector(_sub(hbd.hydrogen, hbd.donor))
                dh_dist = _norm(dh)
                theta = _angle(dh, da, dh_dist, da_dist)
                if theta is not None and theta < theta_cut:
                    yield HBond(Role.ACCEPTOR, hbd.donor, hbd.hydrogen, acceptor, da_dist, theta)


def output_path(filename: str, suffix: str) -> str:
    """Replace the extension after the last dot of ``filename`` by ``suffix``."""
    dot = filename.rfind(".")
    prefix = filename if dot < 0 else filename[:dot]
    return prefix + suffix