import math

import pytest

from hbondprofile.model import Frame, HBondDonor, Molecule
from hbondprofile.radialvol import HBondRvol


def _frame(offset=0.0, box=40.0):
    donor = Molecule(
        "D",
        (offset, 0.0, 0.0),
        donors=[HBondDonor((offset + 1.0, 0.0, 0.0), (offset + 2.0, 0.0, 0.0))],
    )
    acceptor = Molecule("A", (offset + 3.0, 0.0, 0.0), acceptors=[(offset + 3.0, 0.0, 0.0)])
    hmat = ((box, 0.0, 0.0), (0.0, box, 0.0), (0.0, 0.0, box))
    return Frame(hmat, [donor, acceptor])


def _analyser(tmp_path, sele1="D", sele2="A", **kwargs):
    return HBondRvol(
        str(tmp_path / "traj.dump"), sele1, sele2, "all", 3.5, 10.0, 30.0, 10, **kwargs
    )


def _total_bonds(analyser):
    return sum(
        density * 4.0 * math.pi * r * r * analyser.delta_r * analyser.n_frames
        for r, density in analyser.profile()
    )


def test_output_name_uses_suffix(tmp_path):
    analyser = _analyser(tmp_path)
    assert analyser.output_filename == str(tmp_path / "traj.hbondrvol")


def test_single_bond_lands_in_hydrogen_bin(tmp_path):
    analyser = _analyser(tmp_path)
    analyser.process([_frame()])
    assert analyser.slice_count[2] == 1
    assert sum(analyser.slice_count) == 1
    profile = analyser.profile()
    assert len(profile) == analyser.nbins
    assert [i for i, (_, d) in enumerate(profile) if d != 0.0] == [2]


def test_density_integrates_to_bond_count(tmp_path):
    analyser = _analyser(tmp_path)
    analyser.process([_frame(), _frame(), _frame()])
    assert analyser.n_frames == 3
    assert _total_bonds(analyser) == pytest.approx(sum(analyser.slice_q) / 3 * 3)
    assert sum(analyser.slice_q) == 3


def test_both_directions_counted_with_all_selections(tmp_path):
    analyser = _analyser(tmp_path, sele1="all", sele2="all")
    analyser.process([_frame()])
    assert analyser.slice_q[2] == 2


def test_step_skips_frames_but_normalises_by_all(tmp_path):
    analyser = _analyser(tmp_path, step=2)
    analyser.process([_frame(), _frame(), _frame(), _frame()])
    assert analyser.n_frames == 4
    assert sum(analyser.slice_q) == 2
    assert _total_bonds(analyser) == pytest.approx(2.0)


def test_radius_outside_range_raises(tmp_path):
    analyser = _analyser(tmp_path)
    with pytest.raises(ValueError):
        analyser.process([_frame(offset=13.0)])


def test_report_lists_every_bin(tmp_path):
    analyser = _analyser(tmp_path, analysis_type="HBondRvol", param_string="rcut=3.5")
    analyser.process([_frame()])
    lines = analyser.report().splitlines()
    assert lines[0] == "# HBondRvol"
    assert lines[3] == "#selection 3: (all)"
    assert lines[4] == "# parameters: rcut=3.5"
    assert lines[5] == "#distance\tH Bonds"
    rows = lines[6:]
    assert len(rows) == 10
    assert rows[0] == "0.5\t0"


def test_process_writes_report_file(tmp_path):
    analyser = _analyser(tmp_path)
    analyser.process([_frame()])
    with open(analyser.output_filename, encoding="utf-8") as stream:
        assert stream.read() == analyser.report()


def test_write_to_missing_directory_raises(tmp_path):
    analyser = _analyser(tmp_path, output_filename=str(tmp_path / "missing" / "out.txt"))
    with pytest.raises(OSError, match="HBondRvol: unable to open"):
        analyser.write()


def test_invalid_bins_rejected(tmp_path):
    with pytest.raises(ValueError):
        HBondRvol(str(tmp_path / "t.dump"), "D", "A", "all", 3.5, 10.0, 30.0, 0)