# hbondprofile

Count hydrogen bonds between two selections of molecules across the frames
of a simulation, and turn the counts into binned profiles.

| Class       | Module                   | Profile                                                           | Output suffix |
|-------------|--------------------------|-------------------------------------------------------------------|---------------|
| `HBondZ`    | `hbondprofile.slab`      | mean hydrogen bonds per molecule in slabs along x, y or z         | `.hbondz`     |
| `HBondZvol` | `hbondprofile.slabvol`   | hydrogen bonds per slab volume per frame, slabs along an axis     | `.hbondzvol`  |
| `HBondR`    | `hbondprofile.radial`    | mean hydrogen bonds per molecule in spherical shells              | `.hbondr`     |
| `HBondRvol` | `hbondprofile.radialvol` | hydrogen bonds per shell volume per frame, binned by hydrogen     | `.hbondrvol`  |

A hydrogen bond is counted between a donor D (with its donated hydrogen H)
and an acceptor A when the minimum-image distance D–A is below `r_cut` and
the angle between the D–H and D–A vectors is below `theta_cut` degrees.
Pairs where the angle cannot be computed (a zero-length vector) are not
counted. Both directions count: molecules of the first selection as donors
to the second, and as acceptors from it.

## Installing

```
pip install .
```

The package uses only the standard library. Install the `test` extra
(`pip install .[test]`) to run the test suite with pytest.

## The data model

`hbondprofile.model` holds:

- `HBondDonor(donor, hydrogen)`: a donor atom position and the position of
  the hydrogen it donates.
- `Molecule(name, com, donors, acceptors)`: a molecule with its centre of
  mass, its `HBondDonor` pairs and its acceptor positions.
- `Frame(hmat, molecules, periodic=True)`: one snapshot, with a 3×3 box
  matrix. `wrap_vector(vector)` returns the minimum-image vector (a
  singular box raises `ValueError`); `box_length(axis)` returns the
  diagonal box element for axis 0, 1 or 2.
- `Selection(script, predicate=None)`: chooses molecules from a frame.
  Without a predicate the script is a whitespace-separated list of molecule
  names, and the word `all` selects every molecule. `select(frame)` returns
  the chosen molecules in frame order.
- `find_hbonds(mol1, mol2, frame, r_cut, theta_cut)`: yields `HBond`
  records (`role`, `donor`, `hydrogen`, `acceptor`, `distance`, `angle`),
  where `role` is a `Role` (`DONOR` or `ACCEPTOR`) saying what `mol1` does.
  Bonds where `mol1` donates come first.
- `output_path(filename, suffix)`: replaces the extension after the last dot
  of `filename` with `suffix`.

## Running an analysis

```python
from hbondprofile.model import Frame, HBondDonor, Molecule
from hbondprofile.slab import HBondZ

box = ((20.0, 0.0, 0.0), (0.0, 20.0, 0.0), (0.0, 0.0, 20.0))
a = Molecule("SPCE", com=(0.0, 0.0, 1.0),
             donors=[HBondDonor((0.0, 0.0, 1.0), (0.0, 0.0, 2.0))],
             acceptors=[(0.0, 0.0, 1.0)])
b = Molecule("SPCE", com=(0.0, 0.0, 3.8),
             acceptors=[(0.0, 0.0, 3.8)])
frames = [Frame(box, [a, b])]

analysis = HBondZ("run.dump", "SPCE", "SPCE", r_cut=3.5, theta_cut=30.0, nbins=10)
analysis.process(frames)      # writes run.hbondz
print(analysis.profile())     # [(coordinate, mean bonds per molecule), ...]
```

Constructors:

- `HBondZ(filename, sele1, sele2, r_cut, theta_cut, nbins, axis=2, *, step=1, output_filename=None)`
  and `HBondZvol` with the same arguments. `axis` must be 0, 1 or 2.
  Molecules are binned by the centre-of-mass coordinate along the axis
  (wrapped into the box when the frame is periodic), with the box centred
  on the origin. Bin positions in the output use the average box length.
- `HBondR(filename, sele1, sele2, sele3, r_cut, length, theta_cut, nbins, *, step=1, analysis_type="", param_string="", output_filename=None)`
  and `HBondRvol` with the same arguments. Bins have width `length / nbins`
  and measure distance from the origin: `HBondR` bins each molecule of
  selection 1 by its centre of mass, `HBondRvol` bins each bond by its
  hydrogen. The third selection only appears in the report header.

Every analyser has:

- `process(frames)`: uses every `step`-th frame. `HBondZ` and `HBondZvol`
  write the output once at the end; `HBondR` and `HBondRvol` rewrite it
  after each frame used. The volume analysers divide by the total number of
  frames passed in.
- `profile()`: the binned values as (position, value) pairs. `HBondR` lists
  only occupied bins; the others list every bin, with 0 for empty ones.
- `report()`: the text of the output file, header lines included.
- `write()`: writes that text to `output_filename`, which defaults to the
  dump file name with its extension replaced by the suffix above.

A position that falls outside the binned range raises `ValueError`; a file
that cannot be opened for writing raises `OSError`.

## What it does not do

The package reads no trajectory or dump files and has no command-line
tool: frames are built in Python as `Frame` objects and passed to
`process`. Selections are plain name lists or Python predicates, not a
selection language.