import numpy as np

from table2tree.bits import DASH
from table2tree.cubes import build_cube_tables
from table2tree.errors import ConfigurationError
from table2tree.params import Params
from table2tree.table import DecisionTable
from table2tree.tracing import reconstruct
from table2tree.tree import DecisionTree
from table2tree.utils import maybe_timed


def convert(table: DecisionTable, params: Params = Params()) -> DecisionTree:
  '''
  compiles a fully populated decision table into an equivalent decision tree

  raises ConfigurationError when the table has too many conditions for
  params.max_conditions and IncompleteTableError when a row has no rule
  '''
  n = table.condition_count
  if n > params.max_conditions:
    raise ConfigurationError(f'{n} conditions is more than max_conditions={params.max_conditions}')

  # raises IncompleteTableError before any cube is built
  cube_tables = build_cube_tables(table, params)

  with maybe_timed(params.verbose, 'traceback ...'):
    root = reconstruct(n, np.full(n, DASH, dtype=np.uint8), cube_tables)

  return DecisionTree(n, table.action_count, root)
