# attractorlab

attractorlab iterates three-dimensional chaotic maps and flows (Lorenz,
Lorenz-84, Rössler, Pickover, Clifford, Clifford rectangle, de Jong,
Svensson, a family of polynomial maps and Rabinovich–Fabrikant) and helps you
find, colour and export their strange attractors.

For every system it can:

- settle the orbit and measure its bounds, centre and a scale that fits the
  attractor into a 100 × 100 frame;
- estimate the Lyapunov exponent and tell chaotic attractors apart from fixed
  points, periodic orbits, neutrally stable orbits and orbits that run off to
  infinity;
- search the parameter space at random until it hits a chaotic attractor;
- colour every point by depth, velocity or turning angle through a colour
  gradient, or paint it in a single colour;
- write the orbit out as a Wavefront OBJ point cloud.

It needs nothing beyond the Python standard library (3.10 or later).

## Installing

```
pip install attractorlab
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "attractorlab[test]"
pytest
```

## Command line

```
attractorlab --list
```

prints the names of every attractor type.

```
attractorlab --type Clifford --random --seed 1 --count 50000 -o clifford.obj
```

searches for random chaotic parameters of the Clifford system, writes 50,000
points to `clifford.obj`, and prints the type, the parameter values, the
centre and the scale.

Options:

- `--type NAME` – the attractor system (default `Rossler`);
- `--parameters VALUE ...` – the parameter values, one per parameter of the
  system; a wrong number of values is an error;
- `--random` – search for random parameters giving a chaotic attractor; the
  command exits with status 1 if none is found;
- `--tries N` – how many random parameter sets to try (default 10000);
- `--seed N` – seed for the random generator, for repeatable results;
- `--count N` – number of points to export (default 10000);
- `-o`, `--output FILE` – write the points to this OBJ file;
- `--list` – list the attractor types and exit.

## Using the library

```python
from attractorlab.attractor import Attractor, AttractorType, attractor_types
from attractorlab.colors import ColorModel, ColoringMode

print(attractor_types())          # the names of every available system

colors = ColorModel()
colors.coloring_mode = ColoringMode.DEPTH
attractor = Attractor(AttractorType.DEJONG, color_model=colors)

# Look for a chaotic parameter set; returns False if none was found.
if attractor.random():
    for position, color in attractor.points(1000):
        ...                       # a Vertex of the orbit and its Color

    attractor.export_obj("attractor.obj", 100_000)
```

`Attractor` (`attractorlab.attractor`) holds a system, its parameters and
the measured `AttractorData` (`data`), exposed through `minimum`, `maximum`,
`center` and `scale`. Assigning to `kind` switches to another system and
loads its default parameters. `set_parameters` takes one value per parameter
and re-measures the attractor; it raises `ValueError` when the number of
values does not match. `export_obj` accepts a file system path or a `file:`
URL. Pass `rng=random.Random(seed)` for repeatable random searches.

The systems themselves live in `attractorlab.systems`; each one's `next`
method maps a `Vertex` (`attractorlab.vertex`) to the following point.

Parameters live in a `ParameterListModel` (`attractorlab.parameters`); each
`Parameter` has a name, a range and a value.

Colouring is set on the `ColorModel` (`attractorlab.colors`) through its
`coloring_mode`, `attractor_color` and `gradient_index`, which picks one of
the built-in gradients. A `Gradient` (`attractorlab.gradient`) maps a number
within its range onto a `Color` by linear interpolation between evenly spaced
colour stops.

`PointCloud` (`attractorlab.pointcloud`) packs the points and colours into
a buffer of 32-bit floats (`vertex_data`, seven floats per point) with the
bounding box in `bounds`, rebuilding it on demand after each change.
`ViewModel` (`attractorlab.viewmodel`) ties a Rössler attractor, a colour
model and a point cloud together, refreshing the cloud when either changes,
with `random_attractor()` to jump to a new chaotic attractor.

## What it does not do

attractorlab has no window or interactive 3-D view: it computes, colours and
exports points, and leaves drawing them to other software.