"""
tanhpath Configuration
Tanh networks of different shapes, trained online against one path.

Every network sees the same samples in the same order:

  anchors ─→ interpolated (x, y) samples ─┬─→ Network 1-1     ─→ curve
                                          ├─→ Network 1-2-1   ─→ curve
                                          └─→ ...             ─→ curve

The CLI in train.py overrides most of these per run.
"""

# ================================================================
# TARGET PATH
# ================================================================
# Anchor points (x, y) joined by straight lines, all inside [-1, 1].
#
#        ___
#        |  |___
#     ___|

STEP_PATH = [
    (-1.0, -1.0),
    (-0.32, -1.0),
    (-0.32, 1.0),
    (0.32, 1.0),
    (0.32, 0.0),
    (1.0, 0.0),
]

# Same shape with a sloped rise instead of a vertical one
RAMP_PATH = [
    (-1.0, -1.0),
    (-0.8, -1.0),
    (-0.5, -0.5),
    (-0.32, 1.0),
    (0.32, 1.0),
    (0.32, 0.0),
    (1.0, 0.0),
]

POINTS_PER_SEGMENT = 51   # Samples per anchor pair (last anchor is not emitted)

# ================================================================
# NETWORKS
# ================================================================
LEARNING_RATE = 0.05
INIT_RANGE = 0.5          # Parameters start uniform in [-INIT_RANGE, +INIT_RANGE]

# Compared side by side; list position is the network id
ARCHITECTURES = [
    (1, 1),               # no hidden layer
    (1, 1, 1),
    (1, 2, 1),
    (1, 3, 1),
    (1, 4, 1),
    (1, 2, 2, 1),
    (1, 3, 2, 1),         # squeeze in the middle
    (1, 3, 3, 1),
    (1, 3, 2, 3, 1),      # squeeze in the middle
]

# ================================================================
# RENDERING
# ================================================================
GRID_START = -1.0
GRID_STOP = 1.0
GRID_STEP = 0.05

SATURATION_THRESHOLD = 0.95

# ================================================================
# PERSISTENCE
# ================================================================
STORE_DIR = "trained"
PARAMETER_FILE = "network{id}.ai"
FORMULA_DIR = "formulas"

# ================================================================
# LOGGING
# ================================================================
LOG_EVERY = 10            # Passes between progress tables
PASSES = 2000
SEED = 42
