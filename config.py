# config.py

# Sample Vectors (demo of the basic operations)
SAMPLE_A = (3.0, 4.0)
SAMPLE_B = (5.0, 12.0)

# Demo Shape (local vertices around the origin)
SHAPE_NAME = "Box"
SHAPE_VERTICES = [
    (-1.5, -1.0), (1.5, -1.0),
    (1.5, 1.0), (-1.5, 1.0),
]

# Default Transform
ANGLE_DEG = 45.0
SCALE_X = 2.0
SCALE_Y = 1.0
DELTA_X = 4.0
DELTA_Y = 3.0

# Rotation Path
PATH_STEPS = 72

# Plotting
PLOT_MARGIN = 2.0
FIGURE_SIZE = (8, 8)

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
