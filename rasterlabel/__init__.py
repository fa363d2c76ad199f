"""Connected component labeling of 2D binary images.

rasterlabel assigns every maximal group of adjacent
foreground pixels its own integer label, using either
4-connectivity (edges) or 8-connectivity (edges and
corners).

Labeling is a single row-major pass. Each foreground
pixel copies the label of an already visited neighbor
(north and west for 4-connectivity; north-west, north,
north-east and west for 8-connectivity) or receives a
fresh provisional label. When neighbors disagree, their
provisional labels are recorded as equivalent in a
union-find structure with path compression and union
by size.

A second pass replaces every provisional label with its
class representative's final label. Final labels are
dense, 0..N-1, and numbered in the order their component
is first met in a row-major scan, so output is
deterministic. Background pixels are -1.

Text images made of two characters ('0' and '1' by
default) can be decoded, and binary and labeled images
can be rendered as ASCII art.
"""
from .ccl import (
	connected_components,
	label_four_neighborhood, label_eight_neighborhood,
	raster_scan, relabel,
	NEIGHBORHOOD_4, NEIGHBORHOOD_8, BACKGROUND,
)
from .disjoint_set import DisjointSet
from .lib import MalformedShapeError, DisjointSetIndexError, DecodeError
from .operations import num_components, pixel_counts, bounding_boxes, each
from .util import (
	decode, load, save, save_numpy, load_numpy,
	describe, render_binary, render_labels,
)
