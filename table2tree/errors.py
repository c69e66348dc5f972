from typing import Sequence


class TableError(ValueError):
  pass


class ConfigurationError(TableError):
  ''' non-positive condition or action count, or a table too large to convert '''


class StatusError(TableError):
  ''' status vector with the wrong shape or with out-of-range values '''


class ActionError(TableError):
  pass


class EmptyTreeError(TableError):
  pass


class IncompleteTableError(TableError):
  ''' the table still has unset rows when conversion begins '''

  def __init__(self, unset_rows: Sequence[int]):
    self.unset_rows = list(unset_rows)
    shown = ', '.join(str(r) for r in self.unset_rows[:8])
    if len(self.unset_rows) > 8:
      shown += ', ...'
    super().__init__(f'{len(self.unset_rows)} unset rows: {shown}')
