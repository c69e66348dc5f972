import sys

from table2tree.convert import convert
from table2tree.params import Params
from table2tree.table import DecisionTable

# (status, action) for the 5 condition, 8 action worked example:
# with c0 == 0 every row is action 0
EXAMPLE_RULES = [
  ([0, 0, 0, 0, 0], 0),
  ([0, 1, 0, 0, 0], 0),
  ([0, 0, 1, 0, 0], 0),
  ([0, 0, 0, 1, 0], 0),
  ([0, 0, 0, 0, 1], 0),
  ([0, 1, 1, 0, 0], 0),
  ([0, 1, 0, 1, 0], 0),
  ([0, 1, 0, 0, 1], 0),
  ([0, 0, 1, 1, 0], 0),
  ([0, 0, 1, 0, 1], 0),
  ([0, 0, 0, 1, 1], 0),
  ([0, 1, 1, 1, 0], 0),
  ([0, 1, 1, 0, 1], 0),
  ([0, 1, 0, 1, 1], 0),
  ([0, 0, 1, 1, 1], 0),
  ([0, 1, 1, 1, 1], 0),
  ([1, 0, 0, 0, 0], 1),
  ([1, 1, 0, 0, 0], 2),
  ([1, 0, 1, 0, 0], 3),
  ([1, 0, 0, 1, 0], 4),
  ([1, 0, 0, 0, 1], 5),
  ([1, 1, 1, 0, 0], 3),
  ([1, 1, 0, 1, 0], 6),
  ([1, 1, 0, 0, 1], 5),
  ([1, 0, 1, 1, 0], 3),
  ([1, 0, 1, 0, 1], 3),
  ([1, 0, 0, 1, 1], 7),
  ([1, 1, 1, 1, 0], 3),
  ([1, 1, 1, 0, 1], 3),
  ([1, 1, 0, 1, 1], 7),
  ([1, 0, 1, 1, 1], 3),
  ([1, 1, 1, 1, 1], 3),
]


def example_table() -> DecisionTable:
  table = DecisionTable(5, 8)
  for status, action in EXAMPLE_RULES:
    table.add_rule(status, action)
  return table


if __name__ == '__main__':
  # optional csv with columns c0 .. c{n-1}, action
  if len(sys.argv) > 1:
    table = DecisionTable.read_csv(sys.argv[1])
  else:
    table = example_table()
  print(table)

  tree = convert(table, Params(verbose=True))
  print(f'\n{tree.node_count()} nodes, {tree.leaf_count()} leaves, depth {tree.depth()}\n')
  print(tree)
  print(f'pre order:   {tree.pre_order()}')
  print(f'in order:    {tree.in_order()}')
  print(f'post order:  {tree.post_order()}')
  print(f'level order: {tree.level_order()}')
