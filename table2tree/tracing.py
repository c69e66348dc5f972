from typing import List

import numpy as np

from table2tree.bits import StatusLike
from table2tree.cubes import CubeTable
from table2tree.tree import Node, Leaf, Internal


def reconstruct(level: int, status: StatusLike, cube_tables: List[CubeTable]) -> Node:
  '''
  builds the subtree for the cube at (level, status)

  a pure cube becomes a leaf; otherwise the cube's split position becomes the
  test and both children are rebuilt one level down.
  call with level n and the all-DASH status to get the whole tree
  '''
  assert 0 <= level < len(cube_tables)
  cubes = cube_tables[level]
  row = cubes.lookup(status)

  actions = np.flatnonzero(cubes.action_sets[row])
  if len(actions) == 1:
    return Leaf(int(actions[0]))

  # level 0 cubes are always pure, so we only get here with DASH positions left
  assert level > 0
  p = int(cubes.split_positions[row])

  status0 = np.array(status, dtype=np.uint8)
  status0[p] = 0
  status1 = np.array(status, dtype=np.uint8)
  status1[p] = 1

  return Internal(
    p,
    reconstruct(level - 1, status0, cube_tables),
    reconstruct(level - 1, status1, cube_tables),
  )
