# Grading policy (0-100 scale)
PASSING_THRESHOLD = 60.0
CRITICAL_CUTOFF = 65.0
WARNING_CUTOFF = 70.0
APPROVED_CUTOFF = 90.0

# Density estimation
DENSITY_GRID_POINTS = 100
DENSITY_PAD_RATIO = 0.1
DENSITY_MIN_PAD = 5.0  # used when max == min
FALLBACK_BANDWIDTH = 1.0  # used when all samples are identical

# Histogram buckets
EARLY_GRADING_BUCKETS = 4
DEFAULT_MAX_OBSERVED = 10.0
STANDARD_BUCKETS = [
    (0.0, 60.0, 'Failed'),
    (60.0, 70.0, '60-70'),
    (70.0, 80.0, '70-80'),
    (80.0, 90.0, '80-90'),
    (90.0, 1000.0, '90-100'),  # absorbs extra credit above 100
]

# Description headers
SUBJECT_HEADER_PREFIX = 'ASIGNATURA:'
