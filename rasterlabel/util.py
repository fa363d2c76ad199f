from typing import Iterable, Union

import io
import os
import gzip
import lzma

import numpy as np

from .ccl import BACKGROUND
from .lib import DecodeError, as_binary_grid

BACKGROUND_CHARACTER = "0"
FOREGROUND_CHARACTER = "1"

def _open(filelike, mode:str):
  if (
    isinstance(filelike, str)
    and os.path.splitext(filelike)[1] == '.gz'
  ):
    return gzip.open(filelike, mode)
  elif (
    isinstance(filelike, str)
    and os.path.splitext(filelike)[1] in ('.lzma', '.xz')
  ):
    return lzma.open(filelike, mode)
  return open(filelike, mode)

def _load(filelike) -> str:
  if hasattr(filelike, 'read'):
    text = filelike.read()
  else:
    with _open(filelike, 'rt') as f:
      text = f.read()

  if isinstance(text, bytes):
    text = text.decode('utf8')
  return text

def decode(
  lines:Union[str, Iterable[str]],
  background:str = BACKGROUND_CHARACTER,
  foreground:str = FOREGROUND_CHARACTER,
) -> np.ndarray:
  """
  Decode a text image into a boolean array.

  Each line is one row. The background character maps
  to False and the foreground character to True. Any
  other character raises a DecodeError. Trailing blank
  lines are ignored.
  """
  if isinstance(lines, str):
    lines = lines.splitlines()

  rows = [ line.rstrip("\r\n") for line in lines ]
  while rows and rows[-1] == "":
    rows.pop()

  if background == foreground:
    raise ValueError(f"Background and foreground characters must differ. Got: {background!r}")

  mapping = { background: False, foreground: True }
  grid = []
  for i, line in enumerate(rows):
    row = []
    for j, char in enumerate(line):
      try:
        row.append(mapping[char])
      except KeyError:
        raise DecodeError(char, i + 1, j + 1, f"{background!r}, {foreground!r}") from None
    grid.append(row)

  return as_binary_grid(grid)

def load(filelike, **kwargs) -> np.ndarray:
  """Load a text image from a file-like object or file path."""
  return decode(_load(filelike), **kwargs)

def describe(binary:np.ndarray) -> str:
  sy, sx = np.asarray(binary).shape
  return f"Image size is {sx}x{sy}."

def render_binary(binary:np.ndarray) -> str:
  """Foreground as '#', background as '.'."""
  return "\n".join(
    "".join("#" if px else "." for px in row)
    for row in np.asarray(binary).tolist()
  )

def render_labels(labels:np.ndarray) -> str:
  """Each pixel is printed as its label, background as '.'."""
  labels = np.asarray(labels)
  assert labels.ndim == 2
  return "\n".join(
    "".join(str(px) if px != BACKGROUND else "." for px in row)
    for row in labels.tolist()
  )

def save_numpy(labels:np.ndarray, filelike):
  if isinstance(filelike, str):
    with _open(filelike, 'wb') as f:
      np.save(f, labels)
  else:
    np.save(filelike, labels)

def save(labels:np.ndarray, filelike):
  """
  Save a label image into the file-like object or file path.

  Paths ending in .npy (optionally followed by .gz, .xz
  or .lzma) are written as numpy arrays. Everything else
  gets the text rendering.
  """
  if (
    isinstance(filelike, str)
    and (
      filelike.endswith(".npy")
      or filelike.endswith(".npy.gz")
      or filelike.endswith(".npy.xz")
      or filelike.endswith(".npy.lzma")
    )
  ):
    return save_numpy(labels, filelike)

  text = render_labels(labels) + "\n"

  if hasattr(filelike, 'write'):
    if isinstance(filelike, io.TextIOBase):
      filelike.write(text)
    else:
      filelike.write(text.encode('utf8'))
  else:
    with _open(filelike, 'wt') as f:
      f.write(text)

def load_numpy(filelike) -> np.ndarray:
  if hasattr(filelike, 'read'):
    return np.load(filelike)
  with _open(filelike, 'rb') as f:
    return np.load(io.BytesIO(f.read()))
