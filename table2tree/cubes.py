from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

import numpy as np

from table2tree.bits import DASH, StatusLike, decode, decode_into, cube_key, cube_powers, check_cube_status
from table2tree.combinations import choose, combination_count
from table2tree.errors import IncompleteTableError, StatusError
from table2tree.params import Params, DEBUG_STATS
from table2tree.table import DecisionTable
from table2tree.utils import maybe_timed, format_status


@dataclass
class Cube:
  status: np.ndarray
  gain: int
  actions: Tuple[int, ...]

  # condition whose 0/1 children were merged into this cube
  # -1 at level 0
  split_position: int

  @property
  def pure(self) -> bool:
    return len(self.actions) == 1

  def __str__(self):
    return (f'{format_status(self.status)}: gain={self.gain}, '
      + f'actions={list(self.actions)}, split={self.split_position}')


@dataclass
class CubeTable:
  '''
  every cube with exactly `level` DASH positions

  row r of each array describes one cube; `rows` maps a cube key to its row
  '''
  level: int
  statuses: np.ndarray
  gains: np.ndarray

  # (cubes, actions) bitset of the actions reachable inside each cube
  action_sets: np.ndarray
  split_positions: np.ndarray
  rows: Dict[int, int]

  def __len__(self) -> int:
    return len(self.gains)

  def __iter__(self) -> Iterator[Cube]:
    for r in range(len(self)):
      yield self.cube(r)

  def lookup(self, status: StatusLike) -> int:
    status = check_cube_status(status, self.statuses.shape[1])
    dashes = int(np.count_nonzero(status == DASH))
    if dashes != self.level:
      raise StatusError(f'cube at level {self.level} needs {self.level} DASH positions, got {dashes}')
    return self.rows[cube_key(status)]

  def cube(self, row: int) -> Cube:
    return Cube(
      self.statuses[row].copy(),
      int(self.gains[row]),
      tuple(int(a) for a in np.flatnonzero(self.action_sets[row])),
      int(self.split_positions[row]),
    )


def _init(level: int, n: int, k: int) -> CubeTable:
  # pre-allocated to the number of cubes at this level:
  # C(n, level) choices of DASH positions, 2^(n-level) assignments of the rest
  count = combination_count(n, level) * (1 << (n - level))
  return CubeTable(
    level,
    np.zeros((count, n), dtype=np.uint8),
    np.zeros(count, dtype=np.int32),
    np.zeros((count, k), dtype=bool),
    np.full(count, -1, dtype=np.int32),
    {},
  )


def _level_zero(table: DecisionTable) -> CubeTable:
  n = table.condition_count
  unset = table.unset_rows()
  if len(unset) > 0:
    raise IncompleteTableError(unset.tolist())

  assert np.all(table.actions < table.action_count)

  cubes = _init(0, n, table.action_count)
  for value in range(1 << n):
    # row r of level 0 is the table row with packed key r
    status = decode(value, n)
    cubes.statuses[value] = status
    cubes.action_sets[value, table.actions[value]] = True
    cubes.rows[cube_key(status)] = value

  assert np.all(cubes.action_sets.sum(axis=1) == 1)
  return cubes


def _next_level(prev: CubeTable, n: int, k: int) -> CubeTable:
  level = prev.level + 1
  cubes = _init(level, n, k)
  powers = cube_powers(n)
  status = np.zeros(n, dtype=np.uint8)

  dash_sets, free_sets = choose(level, range(n))
  row = 0
  for dash_positions, free_positions in zip(dash_sets, free_sets):
    status[dash_positions] = DASH

    for value in range(1 << len(free_positions)):
      decode_into(value, status, free_positions)
      key = cube_key(status)

      best_gain = -1
      best_pos = -1
      best_rows = (-1, -1)
      for p in dash_positions:
        # children fix p to 0 and 1, the other DASH positions stay
        row0 = prev.rows[key - 2 * int(powers[p])]
        row1 = prev.rows[key - int(powers[p])]
        same_actions = np.array_equal(prev.action_sets[row0], prev.action_sets[row1])
        gain = int(prev.gains[row0]) + int(prev.gains[row1]) + int(same_actions)

        # first position wins ties
        if gain > best_gain:
          best_gain = gain
          best_pos = int(p)
          best_rows = (row0, row1)

      row0, row1 = best_rows
      cubes.statuses[row] = status
      cubes.gains[row] = best_gain
      cubes.action_sets[row] = prev.action_sets[row0] | prev.action_sets[row1]
      cubes.split_positions[row] = best_pos
      cubes.rows[key] = row
      row += 1

  assert row == len(cubes)
  return cubes


def _print_stats(cubes: CubeTable) -> None:
  action_counts = cubes.action_sets.sum(axis=1)
  print(f"""
    level {cubes.level}: {len(cubes)} cubes
      pure cubes: {np.count_nonzero(action_counts == 1)}
      max gain: {cubes.gains.max()}
      {np.bincount(action_counts)=}
    """)


def build_cube_tables(table: DecisionTable, params: Params = Params()) -> List[CubeTable]:
  '''
  builds the cube tables for levels 0 .. n

  level 0 holds the table rows; level i merges pairs of level i-1 cubes that
  differ only at one condition, keeping the condition with the best gain
  '''
  n = table.condition_count
  k = table.action_count
  assert table.actions.shape == (1 << n,)

  with maybe_timed(params.verbose, 'cube level 0 ...'):
    cube_tables = [_level_zero(table)]
  for level in range(1, n + 1):
    with maybe_timed(params.verbose, f'cube level {level} ...'):
      cube_tables.append(_next_level(cube_tables[-1], n, k))

  if DEBUG_STATS:
    for cubes in cube_tables:
      _print_stats(cubes)

  assert len(cube_tables[n]) == 1
  return cube_tables
