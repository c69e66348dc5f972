from typing import Sequence, Union

import numpy as np

from table2tree.errors import StatusError

# status value for a condition the tree has not tested yet
DASH = 2

# action stored at a table row that has no rule
UNSET = -1

StatusLike = Union[np.ndarray, Sequence[int]]


def decode(value: int, n: int) -> np.ndarray:
  ''' bit i of value (least significant first) => status[i] '''
  assert n >= 0
  assert 0 <= value < (1 << n) or n == 0
  return ((value >> np.arange(n)) & 1).astype(np.uint8)


def decode_into(value: int, status: np.ndarray, positions: np.ndarray) -> None:
  '''
  writes bit i of value into status[positions[i]]

  the other entries of status (the DASH positions of a cube) are left as they are
  '''
  assert status.dtype == np.uint8
  assert positions.ndim == 1
  status[positions] = (value >> np.arange(len(positions))) & 1


def row_key(status: np.ndarray) -> int:
  ''' packed table index of a fully specified (0/1) status vector '''
  assert status.dtype == np.uint8
  return int(np.dot(status.astype(np.int64), 1 << np.arange(len(status), dtype=np.int64)))


def cube_powers(n: int) -> np.ndarray:
  return 3 ** np.arange(n, dtype=np.int64)


def cube_key(status: np.ndarray) -> int:
  '''
  base-3 key of a cube status vector over {0, 1, DASH}

  every cube of every level gets its own key, so keys from different levels never collide;
  fixing DASH position p to 0 subtracts 2 * 3^p, fixing it to 1 subtracts 3^p
  '''
  assert status.dtype == np.uint8
  return int(np.dot(status.astype(np.int64), cube_powers(len(status))))


def _as_status(status: StatusLike, n: int) -> np.ndarray:
  arr = np.asarray(status)
  if arr.shape != (n,):
    raise StatusError(f'expected a status vector of length {n}, got shape {arr.shape}')
  if arr.dtype == np.bool_:
    arr = arr.astype(np.uint8)
  if not np.issubdtype(arr.dtype, np.integer):
    raise StatusError(f'status vector must hold integers, got dtype {arr.dtype}')
  return arr


def check_row_status(status: StatusLike, n: int) -> np.ndarray:
  ''' validates a 0/1 lookup key and returns it as a uint8 array '''
  arr = _as_status(status, n)
  if np.any((arr != 0) & (arr != 1)):
    raise StatusError(f'status values must be 0 or 1, got {arr.tolist()}')
  return arr.astype(np.uint8)


def check_cube_status(status: StatusLike, n: int) -> np.ndarray:
  ''' validates a 0/1/DASH cube key and returns it as a uint8 array '''
  arr = _as_status(status, n)
  if np.any((arr < 0) | (arr > DASH)):
    raise StatusError(f'cube status values must be 0, 1 or {DASH}, got {arr.tolist()}')
  return arr.astype(np.uint8)
