"""Signal smoothing toolkit built around a direct-form digital filter."""

from .dsp import evaluate, Filter
from .moving import sma, hma, henderson

__version__ = '0.1.0'
