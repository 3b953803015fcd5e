"""
Immutable constants for the disclosure metrics.

Patterns and reference values that define WHAT each metric measures. For
tunable values (Fog weight, complex-word threshold, output precision), see
configs/features/disclosure_metrics.yaml
"""

import re
from typing import Final

# ===========================
# Module Metadata
# ===========================

# Bumped whenever a metric definition changes; stamped on every result
DISCLOSURE_METRICS_VERSION: Final[str] = "1.0.0"

# ===========================
# Text Sanitation
# ===========================

# Line breaks become spaces, then runs of whitespace/dashes (rules, "--") collapse
LINE_BREAK_PATTERN: Final[re.Pattern] = re.compile(r'\n+')
SEPARATOR_RUN_PATTERN: Final[re.Pattern] = re.compile(r'[\s-]{2,}')

# ===========================
# Numerical Intensity
# ===========================

# One or more digits, optionally a decimal point and one digit: 42, 3.5, 2017
NUMBER_PATTERN: Final[re.Pattern] = re.compile(r'\d+(\.\d)?')
DIGIT_PATTERN: Final[re.Pattern] = re.compile(r'\d')
