import numpy as np


def lfilter(b, a, x, si=None):
    """ Term-by-term direct-form filter.
    Initial state is written over the first outputs, and the difference
    equation is then accumulated on top of it.
    """
    c = [v / a[0] for v in a]
    d = [v / a[0] for v in b]
    Nsi = max(len(a), len(b)) - 1
    si = [0] * Nsi if si is None else list(si)
    assert len(si) == Nsi

    y = [0] * len(x)
    for i in range(min(Nsi, len(x))):
        y[i] = si[i]

    for n in range(len(x)):
        for k in range(len(d)):
            if n - k >= 0:
                y[n] += d[k] * x[n-k]
        for k in range(1, len(c)):
            if n - k >= 0:
                y[n] -= c[k] * y[n-k]
    return np.array(y)


def assert_approx(x, y, e=1e-12):
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    assert x.shape == y.shape
    assert np.linalg.norm(x - y) <= e * max(np.linalg.norm(x), 1.0)
