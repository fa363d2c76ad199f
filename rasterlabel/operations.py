from typing import Dict, Iterator, Tuple

import numpy as np

from .ccl import BACKGROUND

def num_components(labels:np.ndarray) -> int:
  """Returns the number of components in a final label image."""
  labels = np.asarray(labels)
  if labels.size == 0:
    return 0
  return int(np.max(labels)) + 1

def pixel_counts(labels:np.ndarray) -> Dict[int,int]:
  """Count the pixels belonging to each component."""
  labels = np.asarray(labels)
  counts = np.bincount(labels[labels != BACKGROUND].ravel(), minlength=num_components(labels))
  return { label: int(ct) for label, ct in enumerate(counts) }

def bounding_boxes(labels:np.ndarray) -> Dict[int,Tuple[slice,slice]]:
  """
  Compute the bounding box of each component.

  Returns { label: (slice(ymin, ymax+1), slice(xmin, xmax+1)) }
  so that labels[bbox] crops the component.
  """
  labels = np.asarray(labels)
  N = num_components(labels)

  mins = np.full((N, 2), np.iinfo(np.int64).max, dtype=np.int64)
  maxs = np.full((N, 2), -1, dtype=np.int64)

  ys, xs = np.nonzero(labels != BACKGROUND)
  lbls = labels[ys, xs]

  np.minimum.at(mins[:,0], lbls, ys)
  np.minimum.at(mins[:,1], lbls, xs)
  np.maximum.at(maxs[:,0], lbls, ys)
  np.maximum.at(maxs[:,1], lbls, xs)

  return {
    label: (
      slice(int(mins[label,0]), int(maxs[label,0]) + 1),
      slice(int(mins[label,1]), int(maxs[label,1]) + 1),
    )
    for label in range(N)
  }

def each(labels:np.ndarray, binary:bool = True) -> Iterator[Tuple[int, np.ndarray]]:
  """
  Iterate over the components in label order.

  Yields (label, image) where image is a full size
  boolean mask (binary=True) or an array holding the
  label where the component is and -1 elsewhere.
  """
  labels = np.asarray(labels)
  for label in range(num_components(labels)):
    mask = labels == label
    if binary:
      yield label, mask
    else:
      yield label, np.where(mask, labels, BACKGROUND).astype(labels.dtype, copy=False)
