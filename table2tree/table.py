from typing import Optional

import numpy as np
import pandas as pd

from table2tree.bits import UNSET, StatusLike, decode, row_key, check_row_status
from table2tree.errors import ConfigurationError, ActionError


class DecisionTable:
  '''
  single-output decision table over n boolean conditions and k actions

  stored as a dense array of 2^n actions indexed by the packed status vector;
  rows with no rule hold UNSET
  '''

  def __init__(self, condition_count: int, action_count: int):
    if condition_count <= 0:
      raise ConfigurationError(f'number of conditions must be greater than 0, got {condition_count}')
    if action_count <= 0:
      raise ConfigurationError(f'number of actions must be greater than 0, got {action_count}')

    self.condition_count = condition_count
    self.action_count = action_count
    self.rule_count = 0
    self.actions = np.full(1 << condition_count, UNSET, dtype=np.int32)

  @property
  def empty(self) -> bool:
    return self.rule_count == 0

  @property
  def complete(self) -> bool:
    return self.rule_count == len(self.actions)

  def unset_rows(self) -> np.ndarray:
    return np.flatnonzero(self.actions == UNSET)

  def add_rule(self, status: StatusLike, action: int) -> int:
    ''' returns the action previously at this row, or UNSET '''
    if not 0 <= action < self.action_count:
      raise ActionError(f'action must be in [0, {self.action_count}), got {action}')
    row = self._row(status)
    old_action = int(self.actions[row])
    self.actions[row] = action
    if old_action == UNSET:
      self.rule_count += 1
    return old_action

  def delete_rule(self, status: StatusLike) -> int:
    row = self._row(status)
    old_action = int(self.actions[row])
    self.actions[row] = UNSET
    if old_action != UNSET:
      self.rule_count -= 1
    return old_action

  def set_actions(self, actions: np.ndarray) -> None:
    ''' replaces every row at once; entries may be UNSET '''
    actions = np.asarray(actions)
    if actions.shape != self.actions.shape:
      raise ConfigurationError(f'expected {len(self.actions)} actions, got shape {actions.shape}')
    if not np.issubdtype(actions.dtype, np.integer):
      raise ActionError(f'actions must be integers, got dtype {actions.dtype}')
    is_set = (actions != UNSET)
    if np.any(is_set & ((actions < 0) | (actions >= self.action_count))):
      raise ActionError(f'actions must be in [0, {self.action_count}) or UNSET')
    self.actions[:] = actions
    self.rule_count = int(np.count_nonzero(is_set))

  def test(self, status: StatusLike) -> int:
    return int(self.actions[self._row(status)])

  def _row(self, status: StatusLike) -> int:
    return row_key(check_row_status(status, self.condition_count))

  def to_frame(self) -> pd.DataFrame:
    ''' one row per status vector, columns c0 .. c{n-1} and action '''
    n = self.condition_count
    rows = np.arange(len(self.actions))
    bits = (rows[:, None] >> np.arange(n)) & 1
    frame = pd.DataFrame(bits.astype(np.uint8), columns=[f'c{i}' for i in range(n)])
    frame['action'] = self.actions
    return frame

  @classmethod
  def from_frame(cls, frame: pd.DataFrame, action_count: Optional[int] = None) -> 'DecisionTable':
    '''
    builds a table from columns c0 .. c{n-1} and action

    rows whose action is UNSET are skipped; action_count defaults to max action + 1
    '''
    if 'action' not in frame.columns:
      raise ConfigurationError('frame needs an "action" column')
    # columns are matched by name, whatever order the frame has them in
    n = len(frame.columns) - 1
    condition_cols = [f'c{i}' for i in range(n)]
    missing = [c for c in condition_cols if c not in frame.columns]
    if missing:
      raise ConfigurationError(f'frame needs condition columns c0 .. c{n - 1}, missing {missing}')
    if action_count is None:
      actions = frame['action'].values
      action_count = int(actions.max()) + 1 if len(actions) > 0 else 0

    table = cls(len(condition_cols), action_count)
    statuses = frame[condition_cols].values
    for status, action in zip(statuses, frame['action'].values):
      if action == UNSET:
        continue
      table.add_rule(status, int(action))
    return table

  @classmethod
  def read_csv(cls, path: str, action_count: Optional[int] = None) -> 'DecisionTable':
    return cls.from_frame(pd.read_csv(path), action_count)

  def __str__(self):
    n = self.condition_count
    lines = [
      f'Decision Table: {self.rule_count} rules, {n} conditions, {self.action_count} actions',
      '         ' + ''.join(f'c{i:<3}' for i in range(n)) + 'action',
    ]
    for row, action in enumerate(self.actions):
      status = decode(row, n)
      lines.append(f'rule {row:<3} ' + ''.join(f'{int(s):<4}' for s in status) + f'{action}')
    return '\n'.join(lines)
