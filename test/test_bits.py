import numpy as np
import pytest
from numpy.testing import assert_array_equal

from table2tree.bits import (
  DASH,
  decode,
  decode_into,
  row_key,
  cube_key,
  check_row_status,
  check_cube_status,
)
from table2tree.errors import StatusError


def test_decode():
  # least significant bit first
  assert_array_equal(decode(5, 3), [1, 0, 1])
  assert_array_equal(decode(6, 4), [0, 1, 1, 0])
  assert_array_equal(decode(0, 2), [0, 0])
  assert decode(5, 3).dtype == np.uint8

  for value in range(16):
    assert row_key(decode(value, 4)) == value


def test_decode_into():
  # only the free positions are written, DASH stays
  status = np.array([DASH, 0, DASH, 0], dtype=np.uint8)
  decode_into(2, status, np.array([1, 3]))
  assert_array_equal(status, [DASH, 0, DASH, 1])

  decode_into(1, status, np.array([1, 3]))
  assert_array_equal(status, [DASH, 1, DASH, 0])

  # nothing to write at the top level
  status = np.full(3, DASH, dtype=np.uint8)
  decode_into(0, status, np.array([], dtype=np.intp))
  assert_array_equal(status, [DASH, DASH, DASH])


def test_keys():
  assert row_key(np.array([1, 0, 1], dtype=np.uint8)) == 5
  assert row_key(np.array([0, 0, 0, 0, 1], dtype=np.uint8)) == 16

  assert cube_key(np.array([DASH, 0, 1], dtype=np.uint8)) == 2 + 0 + 9
  assert cube_key(np.array([DASH, DASH], dtype=np.uint8)) == 8

  # fixing a DASH to 0 or 1 moves to a distinct key
  top = np.array([DASH, DASH, 1], dtype=np.uint8)
  zero = np.array([DASH, 0, 1], dtype=np.uint8)
  one = np.array([DASH, 1, 1], dtype=np.uint8)
  assert cube_key(zero) == cube_key(top) - 2 * 3
  assert cube_key(one) == cube_key(top) - 3


def test_check_row_status():
  assert_array_equal(check_row_status([1, 0, 1], 3), [1, 0, 1])
  assert_array_equal(check_row_status(np.array([True, False]), 2), [1, 0])

  with pytest.raises(StatusError):
    check_row_status([1, 0], 3)
  with pytest.raises(StatusError):
    check_row_status([1, DASH, 0], 3)
  with pytest.raises(StatusError):
    check_row_status([1, -1, 0], 3)
  with pytest.raises(StatusError):
    check_row_status([[1, 0, 1]], 3)
  with pytest.raises(StatusError):
    check_row_status([0.5, 0, 1], 3)

  # still a ValueError for callers that don't know our types
  with pytest.raises(ValueError):
    check_row_status([1, 0], 3)


def test_check_cube_status():
  assert_array_equal(check_cube_status([DASH, 0, 1], 3), [DASH, 0, 1])

  with pytest.raises(StatusError):
    check_cube_status([3, 0, 1], 3)
  with pytest.raises(StatusError):
    check_cube_status([DASH, 0], 3)
