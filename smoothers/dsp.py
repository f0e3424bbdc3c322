"""Digital filtering capabilities for smoothers."""

import logging

import numpy as np

from . import common

log = logging.getLogger(__name__)


def evaluate(a, b, x, si=None, config=None):
    """ Apply the rational transfer function b/a to the data x.

    The output follows the direct-form difference equation:

        y[n] = sum(d[k] * x[n-k], k=0..M) - sum(c[k] * y[n-k], k=1..N)

    where c = a / a[0] and d = b / a[0], and samples before the start of
    x (or y) are taken as zero.

    The initial state si (of length max(len(a), len(b)) - 1, zeros when
    omitted) is written into the first output samples before the
    recurrence runs, so the recurrence accumulates on top of it and reads
    it back as output history.
    """
    if si is None:
        a, b, x = common.promote(a, b, x, names=['a', 'b', 'x'],
                                 config=config)
        si = np.zeros(max(len(a), len(b)) - 1, dtype=x.dtype)
    else:
        a, b, x, si = common.promote(a, b, x, si,
                                     names=['a', 'b', 'x', 'si'],
                                     config=config)

    if not len(a) or not len(b):
        raise ValueError('a and b must not be empty')

    Nsi = max(len(a), len(b)) - 1
    if len(si) != Nsi:
        raise ValueError(
            f'len(si) must be max(len(a), len(b)) - 1 = {Nsi}'
            f' (got {len(si)})')
    if a[0] == 0:
        raise ValueError('a[0] must not be zero')

    N, M = len(a) - 1, len(b) - 1
    c, d = a / a[0], b / a[0]
    Nx = len(x)
    log.debug('Filtering %d samples (N=%d, M=%d) as %s', Nx, N, M, x.dtype)

    y = np.zeros(Nx, dtype=x.dtype)
    y[:Nsi] = si[:Nx]  # seeded samples are accumulated into below

    for n in range(Nx):
        m = min(n, M) + 1  # feed-forward taps inside x
        y[n] += np.dot(d[:m], x[n::-1][:m])
        k = min(n, N) + 1  # feedback taps inside y (c[0] is skipped)
        if k > 1:
            y[n] -= np.dot(c[1:k], y[n-1::-1][:k-1])
    return y


class Filter:
    """ Rational transfer function b/a, normalized by a[0]. """

    def __init__(self, b, a, config=None):
        a, b = common.promote(a, b, names=['a', 'b'], config=config)
        if not len(a) or not len(b):
            raise ValueError('a and b must not be empty')
        if a[0] == 0:
            raise ValueError('a[0] must not be zero')

        self.b = b / a[0]
        self.a = a / a[0]
        self.order = max(len(a), len(b)) - 1
        self.config = config

    def zero_state(self):
        return np.zeros(self.order, dtype=self.a.dtype)

    def __call__(self, x, si=None):
        return evaluate(a=self.a, b=self.b, x=x, si=si, config=self.config)

    def __repr__(self):
        return '{}(b={}, a={})'.format(
            type(self).__name__, self.b.tolist(), self.a.tolist())
