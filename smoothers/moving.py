"""Moving-average smoothers, evaluated as FIR filters."""

import logging

import numpy as np

from . import common
from . import config as _config
from . import dsp

log = logging.getLogger(__name__)


def _window(x, h, shift, config):
    """ Apply FIR weights h to x, shifting the output left by *shift*
    samples and marking samples with an incomplete window as missing.
    """
    x = common.array(x)
    config = config or _config.default
    y = dsp.evaluate(a=[1], b=h, x=x, config=config)

    n = len(h)
    result = np.full(len(x), config.fill_value, dtype=y.dtype)
    valid = y[n-1:]  # windows fully inside x
    result[n-1-shift:len(x)-shift] = valid
    return result


def sma(x, n, center=False, config=None):
    """ Simple moving average of *n* samples.

    By default the window trails: y[i] = mean(x[i-n+1], ..., x[i]).
    If *center* is set (and n is odd), the window is centered at x[i].
    """
    if not np.isfinite(n) or int(n) != n or n < 1:
        raise ValueError('window size must be a positive integer', n)
    n = int(n)
    if center and n % 2 == 0:
        raise ValueError('centered window size must be odd', n)

    shift = (n - 1) // 2 if center else 0
    log.debug('Simple moving average: n=%d, shift=%d', n, shift)
    return _window(x, h=np.ones(n) / n, shift=shift, config=config)


def henderson(n):
    """ Symmetric Henderson weights for an *n*-term moving average. """
    if not np.isfinite(n) or int(n) != n or n < 3 or n % 2 == 0:
        raise ValueError('Henderson window size must be odd and >= 3', n)
    p = (int(n) - 1) // 2
    m = p + 2
    j = np.arange(-p, p + 1, dtype=float)

    num = ((m-1)**2 - j**2) * (m**2 - j**2) * ((m+1)**2 - j**2)
    num = 315 * num * (3*m**2 - 16 - 11*j**2)
    den = 8*m * (m**2 - 1) * (4*m**2 - 1) * (4*m**2 - 9) * (4*m**2 - 25)
    return num / den


def hma(x, n, config=None):
    """ Henderson moving average of *n* samples, centered at x[i]. """
    h = henderson(n)
    log.debug('Henderson moving average: n=%d', len(h))
    return _window(x, h=h, shift=len(h) // 2, config=config)
