import numpy as np

from table2tree.bits import DASH
from table2tree.cubes import Cube
from table2tree.utils import timed, maybe_timed, percent, format_status


def test_format_status():
  assert format_status(np.array([1, 0, DASH], dtype=np.uint8)) == '10-'
  assert format_status(np.array([], dtype=np.uint8)) == ''

  cube = Cube(np.array([DASH, 1], dtype=np.uint8), 3, (0, 2), 0)
  assert str(cube) == '-1: gain=3, actions=[0, 2], split=0'


def test_percent():
  assert percent(1, 4) == '25.00%'
  assert percent(0, 0) == '0.00%'


def test_timed(capsys):
  with timed('working...'):
    pass
  with maybe_timed(False, 'quiet...'):
    pass
  out = capsys.readouterr().out
  assert 'working...' in out
  assert 'quiet...' not in out
