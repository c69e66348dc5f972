from table2tree.bits import DASH, UNSET
from table2tree.convert import convert
from table2tree.errors import (
  TableError,
  ConfigurationError,
  IncompleteTableError,
  StatusError,
  ActionError,
  EmptyTreeError,
)
from table2tree.params import Params
from table2tree.table import DecisionTable
from table2tree.tree import DecisionTree, Leaf, Internal
