"""
Copyright (c) 2026 pyrafl developers. All rights reserved.

pyrafl: label-distribution statistics for random-forest learners
"""

from __future__ import annotations

import importlib.metadata

from pyrafl.histogram import Histogram
from pyrafl.pmf import ProbabilityMassFunction

__version__ = importlib.metadata.version("pyrafl")

__all__ = ["Histogram", "ProbabilityMassFunction", "__version__"]
