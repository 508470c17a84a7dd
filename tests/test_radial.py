import pytest

from hbondprofile.model import Frame, HBondDonor, Molecule
from hbondprofile.radial import HBondR


def box(length):
    return ((length, 0, 0), (0, length, 0), (0, 0, length))


def make_frame(acceptor_x):
    donor = Molecule("W", (0.5, 0.0, 0.0), [HBondDonor((0, 0, 0), (1, 0, 0))], [])
    acceptor = Molecule("O", (acceptor_x, 0.0, 0.0), [], [(acceptor_x, 0.0, 0.0)])
    return Frame(box(40.0), [donor, acceptor])


def analyser(tmp_path, **kwargs):
    return HBondR(str(tmp_path / "run.dump"), "W", "O", "all", 3.5, 10.0, 30.0, 10, **kwargs)


def test_output_name(tmp_path):
    assert analyser(tmp_path).output_filename == str(tmp_path / "run.hbondr")


def test_single_bond_profile(tmp_path):
    a = analyser(tmp_path)
    a.process([make_frame(2.5)])
    assert a.profile() == [(0.5, 1.0)]
    assert a.slice_count[0] == 1


def test_average_over_frames(tmp_path):
    a = analyser(tmp_path)
    a.process([make_frame(2.5), make_frame(8.0)])
    ((r, avg),) = a.profile()
    assert a.slice_count[0] == 2
    assert avg == a.slice_q[0] / 2


def test_step_skips_frames(tmp_path):
    a = analyser(tmp_path, step=2)
    a.process([make_frame(2.5), make_frame(8.0), make_frame(2.5)])
    assert a.slice_count[0] == 2
    assert a.profile()[0][1] == 1.0


def test_written_file_matches_report(tmp_path):
    a = analyser(tmp_path, param_string="rcut=3.5")
    a.process([make_frame(2.5)])
    text = (tmp_path / "run.hbondr").read_text()
    assert text == a.report()
    lines = text.splitlines()
    assert lines[1] == "#selection 1: (W)"
    assert lines[3] == "#selection 3: (all)"
    assert lines[4] == "# parameters: rcut=3.5"
    assert lines[5] == "#distance\tH Bonds"
    assert lines[6] == "0.5\t1"


def test_radius_outside_range(tmp_path):
    a = analyser(tmp_path)
    far = Molecule("W", (12.0, 0.0, 0.0), [], [])
    with pytest.raises(ValueError):
        a.process([Frame(box(40.0), [far])])


def test_invalid_bins(tmp_path):
    with pytest.raises(ValueError):
        HBondR(str(tmp_path / "x.dump"), "W", "O", "all", 3.5, 10.0, 30.0, 0)


def test_unwritable_output(tmp_path):
    a = analyser(tmp_path, output_filename=str(tmp_path / "missing" / "out.hbondr"))
    with pytest.raises(OSError, match="unable to open"):
        a.write()