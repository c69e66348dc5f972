from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from table2tree.bits import StatusLike, check_row_status
from table2tree.errors import ConfigurationError, ActionError, EmptyTreeError, StatusError


@dataclass(frozen=True)
class Leaf:
  action: int


@dataclass(frozen=True)
class Internal:
  # condition tested at this node
  condition: int

  # taken when the condition is 0
  left: 'Node'

  # taken when the condition is 1
  right: 'Node'


Node = Union[Leaf, Internal]


def label(node: Node) -> int:
  ''' action for leaves, tested condition for internal nodes '''
  if isinstance(node, Leaf):
    return node.action
  return node.condition


def node_str(node: Node, level: int = 0) -> str:
  ''' recursively print the tree '''
  indent = '  ' * level
  if isinstance(node, Leaf):
    return f'{indent}action: {node.action}\n'
  return (f'{indent}[c{node.condition}] == 0:\n'
    + node_str(node.left, level + 1)
    + f'{indent}[c{node.condition}] == 1:\n'
    + node_str(node.right, level + 1))


@dataclass
class DecisionTree:
  condition_count: int
  action_count: int

  # stays None until a table has been converted
  root: Optional[Node] = None

  def __post_init__(self):
    if self.condition_count <= 0:
      raise ConfigurationError(f'number of conditions must be greater than 0, got {self.condition_count}')
    if self.action_count <= 0:
      raise ConfigurationError(f'number of actions must be greater than 0, got {self.action_count}')
    if self.root is None:
      return

    # every test and every leaf must fit the declared counts
    stack = [self.root]
    while stack:
      node = stack.pop()
      if isinstance(node, Leaf):
        if not 0 <= node.action < self.action_count:
          raise ActionError(f'leaf action must be in [0, {self.action_count}), got {node.action}')
        continue
      if not 0 <= node.condition < self.condition_count:
        raise ConfigurationError(f'tested condition must be in [0, {self.condition_count}), got {node.condition}')
      stack.append(node.left)
      stack.append(node.right)

  @property
  def empty(self) -> bool:
    return self.root is None

  def _root(self) -> Node:
    if self.root is None:
      raise EmptyTreeError('decision tree is empty')
    return self.root

  def evaluate(self, status: StatusLike) -> int:
    status = check_row_status(status, self.condition_count)
    node = self._root()
    while isinstance(node, Internal):
      node = node.right if status[node.condition] > 0 else node.left
    return node.action

  def evaluate_many(self, X: np.ndarray) -> np.ndarray:
    ''' evaluates each row of a (rows, conditions) 0/1 matrix '''
    X = np.asarray(X)
    if X.ndim != 2 or X.shape[1] != self.condition_count:
      raise StatusError(f'expected shape (rows, {self.condition_count}), got {X.shape}')
    root = self._root()
    if np.any((X != 0) & (X != 1)):
      raise StatusError('status values must be 0 or 1')

    # push every row down the tree at once, one node at a time
    out = np.zeros(len(X), dtype=np.int32)
    stack = [(root, np.arange(len(X)))]
    while stack:
      node, members = stack.pop()
      if isinstance(node, Leaf):
        out[members] = node.action
        continue
      go_right = X[members, node.condition] > 0
      stack.append((node.left, members[~go_right]))
      stack.append((node.right, members[go_right]))
    return out

  def pre_order(self) -> List[int]:
    out = []
    stack = [self._root()]
    while stack:
      node = stack.pop()
      out.append(label(node))
      if isinstance(node, Internal):
        stack.append(node.right)
        stack.append(node.left)
    return out

  def in_order(self) -> List[int]:
    out = []
    stack: List[Node] = []
    node: Optional[Node] = self._root()
    while node is not None or stack:
      while node is not None:
        stack.append(node)
        node = node.left if isinstance(node, Internal) else None
      node = stack.pop()
      out.append(label(node))
      node = node.right if isinstance(node, Internal) else None
    return out

  def post_order(self) -> List[int]:
    # reversed (node, right, left) pre-order is (left, right, node)
    out = []
    stack = [self._root()]
    while stack:
      node = stack.pop()
      out.append(label(node))
      if isinstance(node, Internal):
        stack.append(node.left)
        stack.append(node.right)
    return out[::-1]

  def level_order(self) -> List[int]:
    out = []
    queue = deque([self._root()])
    while queue:
      node = queue.popleft()
      out.append(label(node))
      if isinstance(node, Internal):
        queue.append(node.left)
        queue.append(node.right)
    return out

  def node_count(self) -> int:
    return len(self.pre_order())

  def leaf_count(self) -> int:
    return (self.node_count() + 1) // 2

  def depth(self) -> int:
    ''' number of tests on the longest path '''
    deepest = 0
    stack = [(self._root(), 0)]
    while stack:
      node, d = stack.pop()
      if isinstance(node, Internal):
        stack.append((node.left, d + 1))
        stack.append((node.right, d + 1))
      else:
        deepest = max(deepest, d)
    return deepest

  def __str__(self):
    if self.root is None:
      return 'empty decision tree\n'
    return node_str(self.root)
