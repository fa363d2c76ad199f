import operator

from .lib import DisjointSetIndexError

class DisjointSet:
  """
  Growable union-find over dense integer ids 0..N-1.

  parent_or_size holds, for each id, either the negated
  size of its class (roots) or the id of its parent.
  Lookups use path compression and merges use union by
  size, so operations are amortized near constant time.
  """
  def __init__(self, n:int = 0):
    self.parent_or_size = [-1] * n
    self.num_classes = n

  def __len__(self):
    return len(self.parent_or_size)

  def __contains__(self, a) -> bool:
    return 0 <= a < len(self.parent_or_size)

  def __repr__(self):
    return f"DisjointSet(elements={self.element_count()}, classes={self.class_count()})"

  def _check(self, a):
    try:
      a = operator.index(a)
    except TypeError:
      raise DisjointSetIndexError(f"Element {a!r} is not an integer id.") from None
    if not (0 <= a < len(self.parent_or_size)):
      raise DisjointSetIndexError(
        f"Element {a} is out of range. Valid ids: 0 to {len(self.parent_or_size) - 1}"
      )
    return a

  def add(self) -> int:
    """Append a new singleton class and return its id."""
    self.parent_or_size.append(-1)
    self.num_classes += 1
    return len(self.parent_or_size) - 1

  def find(self, a:int) -> int:
    a = self._check(a)
    data = self.parent_or_size

    root = a
    while data[root] >= 0:
      root = data[root]

    i = a
    while data[i] >= 0:
      data[i], i = root, data[i]

    return root

  representative = find

  def same(self, a:int, b:int) -> bool:
    return self.find(a) == self.find(b)

  def union(self, a:int, b:int) -> bool:
    """
    Merge the classes of a and b. Returns False if they
    were already the same class.

    The smaller class is attached under the larger one.
    On a tie, b's class goes under a's root.
    """
    i = self.find(a)
    j = self.find(b)
    if i == j:
      return False

    data = self.parent_or_size
    # sizes are stored negated
    if data[i] > data[j]:
      i, j = j, i

    data[i] += data[j]
    data[j] = i
    self.num_classes -= 1
    return True

  merge = union

  def class_size(self, a:int) -> int:
    return -self.parent_or_size[self.find(a)]

  def class_count(self) -> int:
    return self.num_classes

  def element_count(self) -> int:
    return len(self.parent_or_size)
