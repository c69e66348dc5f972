from time import time
from contextlib import contextmanager, nullcontext

import numpy as np

from table2tree.bits import DASH


@contextmanager
def timed(msg: str):
  print(msg)
  start = time()
  yield
  stop = time()
  print(f'({stop - start:.1f}s)')


def maybe_timed(enabled: bool, msg: str):
  return timed(msg) if enabled else nullcontext()


def percent(num: int, denom: int) -> str:
  denom = max(1, denom)
  return f'{100.0 * num / denom:.2f}%'


def format_status(status: np.ndarray) -> str:
  ''' [1, 0, DASH] => "10-" '''
  return ''.join('-' if s == DASH else str(int(s)) for s in status)
