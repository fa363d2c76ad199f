from collections.abc import Sized

import numpy as np

class MalformedShapeError(ValueError):
  pass

class DisjointSetIndexError(IndexError):
  pass

class DecodeError(ValueError):
  def __init__(self, char:str, line:int, column:int, allowed:str):
    self.char = char
    self.line = line
    self.column = column
    super().__init__(
      f"Unrecognized character {char!r} at line {line}, column {column}. "
      f"Expected one of: {allowed}"
    )

def compute_byte_width(x) -> int:
  byte_width = 8
  if x <= np.iinfo(np.int8).max:
    byte_width = 1
  elif x <= np.iinfo(np.int16).max:
    byte_width = 2
  elif x <= np.iinfo(np.int32).max:
    byte_width = 4

  return byte_width

width2dtype = {
  1: np.int8,
  2: np.int16,
  4: np.int32,
  8: np.int64,
}

def compute_label_dtype(x) -> np.dtype:
  """Narrowest signed dtype that can hold labels up to x (and -1)."""
  return width2dtype[compute_byte_width(x)]

def as_binary_grid(grid) -> np.ndarray:
  """
  Validate a rectangular, non-empty 2D grid and
  return it as a boolean numpy array.

  Nested sequences are checked row by row so that
  ragged input is reported instead of being turned
  into an object array.
  """
  if isinstance(grid, np.ndarray):
    if grid.ndim != 2:
      raise MalformedShapeError(f"Grid must be two dimensional. Got shape: {grid.shape}")
    binary = grid.astype(bool, copy=False)
  else:
    rows = list(grid)
    if len(rows) == 0:
      raise MalformedShapeError("Height must be greater than or equal to 1.")

    for i, row in enumerate(rows):
      if not isinstance(row, Sized) or isinstance(row, str):
        raise MalformedShapeError(f"Grid must be two dimensional. Row {i} is not a sequence: {row!r}")

    width = len(rows[0])
    for i, row in enumerate(rows):
      if len(row) != width:
        raise MalformedShapeError(
          f"Grid shape must be rectangular. Row {i} has length {len(row)}, expected {width}."
        )
    binary = np.array(rows, dtype=bool)
    if binary.ndim != 2:
      raise MalformedShapeError(f"Grid must be two dimensional. Got shape: {binary.shape}")

  if binary.shape[0] < 1:
    raise MalformedShapeError("Height must be greater than or equal to 1.")
  if binary.shape[1] < 1:
    raise MalformedShapeError("Width must be greater than or equal to 1.")

  return binary
