import math


TWO_PI = 2 * math.pi

# Generator defaults
N_CURVES = 5
RADIUS_RANGE = (1.0, 11.0)  # half-open [low, high)
STEP_RANGE = (1.0, 6.0)  # half-open [low, high), helix only
ELLIPSE_MINOR_RATIO = 0.5  # minor radius = ratio * major radius

# Evaluation
EVAL_PARAMETER = math.pi / 4
EVAL_PARAMETER_LABEL = "PI/4"

# Reporting
NUMBER_FORMAT = "{:g}"

# Parallel reduction (0 = auto-detect from os.cpu_count())
NUM_WORKERS = 0

# Visualization
SAMPLES_PER_CURVE = 200
HELIX_TURNS = 3
