from numpy.testing import assert_array_equal

from table2tree.combinations import choose, combination_count


def test_choose():
  chosen, rest = choose(2, [0, 1, 2])
  assert [c.tolist() for c in chosen] == [[0, 1], [0, 2], [1, 2]]
  assert [r.tolist() for r in rest] == [[2], [1], [0]]

  # order follows the input, not the values
  chosen, rest = choose(2, [5, 3, 8])
  assert [c.tolist() for c in chosen] == [[5, 3], [5, 8], [3, 8]]
  assert [r.tolist() for r in rest] == [[8], [3], [5]]


def test_choose_edges():
  chosen, rest = choose(0, [4, 7])
  assert len(chosen) == 1
  assert_array_equal(chosen[0], [])
  assert_array_equal(rest[0], [4, 7])

  chosen, rest = choose(2, [4, 7])
  assert len(chosen) == 1
  assert_array_equal(chosen[0], [4, 7])
  assert_array_equal(rest[0], [])

  assert choose(3, [0, 1]) == ([], [])
  assert choose(-1, [0, 1]) == ([], [])


def test_choose_covers_everything():
  indices = list(range(6))
  for m in range(7):
    chosen, rest = choose(m, indices)
    assert len(chosen) == len(rest) == combination_count(6, m)
    assert len({tuple(c) for c in chosen}) == len(chosen)
    for c, r in zip(chosen, rest):
      assert len(c) == m
      assert sorted(c.tolist() + r.tolist()) == indices


def test_combination_count():
  assert combination_count(5, 2) == 10
  assert combination_count(5, 0) == 1
  assert combination_count(5, 5) == 1
  assert combination_count(3, 4) == 0
  assert combination_count(20, 10) == 184756
