import os

import numpy as np
from sklearn.tree import DecisionTreeClassifier

from table2tree.convert import convert
from table2tree.table import DecisionTable
from table2tree.utils import timed, percent


def random_table(condition_count: int, action_count: int, rng: np.random.Generator) -> DecisionTable:
  table = DecisionTable(condition_count, action_count)
  table.set_actions(rng.integers(action_count, size=len(table.actions)))
  return table


def structured_table(condition_count: int, action_count: int, rng: np.random.Generator) -> DecisionTable:
  '''
  random table where only a few conditions matter,
  so there is something to merge
  '''
  relevant = rng.choice(condition_count, size=min(3, condition_count), replace=False)
  lookup = rng.integers(action_count, size=1 << len(relevant))

  table = DecisionTable(condition_count, action_count)
  rows = np.arange(len(table.actions))
  bits = (rows[:, None] >> relevant) & 1
  table.set_actions(lookup[bits @ (1 << np.arange(len(relevant)))])
  return table


def truth_matrix(table: DecisionTable) -> np.ndarray:
  rows = np.arange(len(table.actions))
  return ((rows[:, None] >> np.arange(table.condition_count)) & 1).astype(np.uint8)


if __name__ == '__main__':
  rng = np.random.default_rng(0)
  max_conditions = int(os.environ.get('MAX_CONDITIONS', 8))

  # name => function that builds a table
  generators = {
    'Random':     random_table,
    'Structured': structured_table,
  }

  for name, make_table in generators.items():
    print(f'\n\n{name}:\n')
    for n in range(2, max_conditions + 1):
      table = make_table(n, 4, rng)
      X = truth_matrix(table)

      with timed(f'DP tree, {n} conditions...'):
        tree = convert(table)
      assert np.array_equal(tree.evaluate_many(X), table.actions)

      with timed(f'sklearn tree, {n} conditions...'):
        model = DecisionTreeClassifier(random_state=0)
        model.fit(X, table.actions)
      accuracy = percent(np.count_nonzero(model.predict(X) == table.actions), len(X))

      print(f'''
        DP nodes: {tree.node_count()}, depth {tree.depth()}
        sklearn nodes: {model.tree_.node_count}, depth {model.get_depth()}, accuracy {accuracy}
      ''')
