from itertools import combinations
from typing import List, Sequence, Tuple

import numpy as np
from scipy.special import comb


def combination_count(n: int, m: int) -> int:
  if m < 0 or m > n:
    return 0
  return int(comb(n, m, exact=True))


def choose(m: int, indices: Sequence[int]) -> Tuple[List[np.ndarray], List[np.ndarray]]:
  '''
  every way to pick m of indices, with the indices left over

  order is lexicographic over "take this index" before "skip it", so for
  indices [0, 1, 2] and m = 2 the chosen sets are [0, 1], [0, 2], [1, 2].
  the cube tables are laid out in this order, which also fixes tie-breaks
  between equally good splits
  '''
  indices = list(indices)
  if m < 0 or m > len(indices):
    return [], []

  chosen_sets = []
  complement_sets = []
  for picked in combinations(range(len(indices)), m):
    is_picked = np.zeros(len(indices), dtype=bool)
    is_picked[list(picked)] = True
    all_idx = np.array(indices, dtype=np.intp)
    chosen_sets.append(all_idx[is_picked])
    complement_sets.append(all_idx[~is_picked])

  assert len(chosen_sets) == combination_count(len(indices), m)
  return chosen_sets, complement_sets
