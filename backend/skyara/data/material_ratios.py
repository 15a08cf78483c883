"""Per-m² ratios for the material quantity estimate.

Standard Moroccan R+2 ratios, applied to the built surface of the ground
floor and upper floors (terrace excluded).
"""

from __future__ import annotations

STEEL_KG_PER_M2: float = 38.0
CEMENT_BAGS_PER_M2: float = 3.2
BRICKS_PER_M2: float = 48.0
CONCRETE_M3_PER_M2: float = 0.32
