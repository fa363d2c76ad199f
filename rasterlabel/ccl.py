from typing import Sequence, Tuple

import numpy as np

from .disjoint_set import DisjointSet
from .lib import as_binary_grid, compute_label_dtype

BACKGROUND = -1

# Already visited neighbors in a row-major scan,
# listed in the order they are checked.
NEIGHBORHOOD_4 = (
  (-1, 0), # north
  (0, -1), # west
)
NEIGHBORHOOD_8 = (
  (-1, -1), # north-west
  (-1, 0),  # north
  (-1, 1),  # north-east
  (0, -1),  # west
)

NEIGHBORHOODS = {
  4: NEIGHBORHOOD_4,
  8: NEIGHBORHOOD_8,
}

def raster_scan(
  binary:np.ndarray,
  offsets:Sequence[Tuple[int,int]],
) -> Tuple[np.ndarray, DisjointSet]:
  """
  Single raster pass assigning provisional labels.

  Each foreground pixel takes the label of the first
  foreground neighbor found in offsets and every other
  foreground neighbor's label is merged into that class.
  Pixels without a labeled neighbor get a new label.

  Returns (provisional labels, equivalences).
  """
  sy, sx = binary.shape
  image = binary.tolist()

  equivalences = DisjointSet()
  out = np.full((sy, sx), BACKGROUND, dtype=compute_label_dtype(sx * sy))

  for y in range(sy):
    for x in range(sx):
      if not image[y][x]:
        continue

      label = BACKGROUND
      for dy, dx in offsets:
        ny = y + dy
        nx = x + dx
        if not (0 <= ny < sy and 0 <= nx < sx) or not image[ny][nx]:
          continue

        if label == BACKGROUND:
          label = out[ny,nx]
        else:
          equivalences.union(label, out[ny,nx])

      if label == BACKGROUND:
        label = equivalences.element_count()
        equivalences.add()

      out[y,x] = label

  return out, equivalences

def relabel(out:np.ndarray, equivalences:DisjointSet) -> Tuple[np.ndarray, int]:
  """
  Rewrite provisional labels in place so that each
  component gets a label in 0..N-1, numbered by where
  it first appears in a row-major scan.

  Returns (labels, N).
  """
  sy, sx = out.shape

  next_label = 0
  renumber = [None] * len(equivalences)
  for y in range(sy):
    for x in range(sx):
      if out[y,x] == BACKGROUND:
        continue

      root = equivalences.find(out[y,x])
      if renumber[root] is None:
        renumber[root] = next_label
        next_label += 1

      out[y,x] = renumber[root]

  return out, next_label

def connected_components(binary, connectivity:int = 4, return_N:bool = False):
  """
  Label the connected components of the foreground of
  a 2D binary image.

  binary: rectangular, non-empty 2D array-like. Truthy
    values are foreground.
  connectivity: 4 (edges only) or 8 (edges and corners)
  return_N: also return the number of components

  Returns a signed integer array with the same shape as
  binary. Background is -1 and components are labeled
  0..N-1 in order of first appearance in a row-major scan.
  """
  if connectivity not in NEIGHBORHOODS:
    raise ValueError(f"Connectivity must be 4 or 8. Got: {connectivity}")

  binary = as_binary_grid(binary)
  out, equivalences = raster_scan(binary, NEIGHBORHOODS[connectivity])
  out, N = relabel(out, equivalences)

  if return_N:
    return out, N
  return out

def label_four_neighborhood(binary) -> np.ndarray:
  """4 connected CCL"""
  return connected_components(binary, connectivity=4)

def label_eight_neighborhood(binary) -> np.ndarray:
  """8 connected CCL"""
  return connected_components(binary, connectivity=8)
