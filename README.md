# drawkit

Pure-Python building blocks for interactive 2D drawing tools. It has no
dependencies outside the standard library.

## Modules

- `drawkit.geometry`: frozen dataclasses `Point2d`, `ValuePoint`, `Size`,
  `Scale` and `Region`.
  - `Point2d` supports `+`, `-`, negation, multiplication and division by a
    number, and has `distance`, `magnitude` and `angle` (in degrees).
  - `Size` has `area`, `has_area` and `to_point`.
  - `Region` has `bottom_right`, `has_area`, `intersect`, `scaled` and
    `unscaled`. `unscaled` raises `DrawError` when a scale factor is zero.
  - `cast(int)` rounds half away from zero. `cast(float)` converts to floats.
- `drawkit.view`: `make_view(view_window, source_size, scale)` works out the
  part of a scaled source image that shows through a view window, and where it
  is painted on the target. It returns a `View` with `source`, `target` and
  `scale`. The helpers behind it are `scale_region`, `unscale_region` and
  `constrain_region`. Integral regions are rounded back to integers after
  scaling.
- `drawkit.drag`: `Drag(start, offset, index)` follows a mouse drag. It gives
  the dragged feature's `position`, and the `drag_center`, `size`,
  `magnitude` and `angle` of the drag.
- `drawkit.hue`: `HueGenerator(seed=None)` returns hues in [0, 360) from
  `make_hue()`. Without a seed it is seeded from `now_as_seconds()`.
- `drawkit.settings`: plain validated settings values. These are `Hsv`,
  `BrightnessRange` (low ≤ high, both within [0, 1]), `NodeSettings`,
  `WaveformColor` and `WaveformSettings`. Values out of range raise
  `ValueError`. `format_scale(2.0)` gives `"2.000x"`, and `constrain_scale`
  clamps a zoom factor to the range 0.25–16.
- `drawkit.selection`: `SelectionBrain` keeps a single selection across one or
  more `SelectableList`s of `Node`s. Calling `Node.toggle_select()` selects
  that node. Calling it again on the selected node clears the selection.
- `drawkit.segments`: `SegmentSettings` and `TrigSettings` describe families
  of sine curves.
  - `make_functions` spreads frequencies linearly or logarithmically, using
    `linear_frequencies` and `logarithmic_frequencies`.
  - `make_trig_points` samples one period across an image width.
  - `get_hue` maps a frequency to a hue so that octaves share a colour.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from drawkit.geometry import Point2d, Region, Scale, Size
from drawkit.view import make_view

view = make_view(
    Region(Point2d(-20, 10), Size(640, 480)),
    Size(640, 480),
    Scale(1.0, 1.0),
)
print(view.source, view.target, view.has_area())
```

```python
from drawkit.drag import Drag
from drawkit.geometry import Point2d

drag = Drag(Point2d(10, 10), Point2d(100.0, 50.0))
print(drag.position(Point2d(15, 12)))   # Point2d(x=105.0, y=52.0)
print(drag.magnitude(Point2d(13, 14)))  # 5.0
```

```python
from drawkit.selection import Node, SelectableList, SelectionBrain

nodes = SelectableList([Node(), Node()])
brain = SelectionBrain(nodes)
nodes[0].toggle_select()
print(nodes.selected, nodes[0].is_selected)  # 0 True
nodes[0].toggle_select()
print(nodes.selected)                        # None
```

```python
from drawkit.segments import SegmentSettings, make_functions

for trig in make_functions(SegmentSettings()):
    print(trig.frequency, trig.hue)
```

## What it does not do

drawkit computes geometry, settings and point lists only. It does not:

- render anything or provide any windows or widgets;
- read or write image files;
- include shape types such as polygons, quads or ellipses, or the editing
  operations on them;
- provide any command-line program.