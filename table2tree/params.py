from dataclasses import dataclass

# print per-level cube statistics while building
DEBUG_STATS = False

@dataclass
class Params:
  # the DP visits 3^n cubes, so refuse tables that would never finish
  max_conditions: int = 12

  # time each DP level and the traceback
  verbose: bool = False
