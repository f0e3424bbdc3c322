""" Common package functionality.
Conversion of input sequences into a single numeric representation.

"""

import numbers

import numpy as np

from . import config as _config

real_kinds = 'biuf'  # bool, signed, unsigned, floating


def array(seq, name='x'):
    """ Convert a sequence into a one-dimensional real numpy array. """
    x = np.asarray(seq)
    if x.ndim != 1:
        raise ValueError(f'{name} must be one-dimensional (got shape {x.shape})')
    if x.dtype.kind == 'O':
        if not all(isinstance(v, numbers.Real) for v in x):
            raise TypeError(f'{name} must hold real numbers')
    elif x.dtype.kind not in real_kinds:
        raise TypeError(f'{name} must hold real numbers (got {x.dtype})')
    return x


def promote(*seqs, names=None, config=None):
    """ Convert all sequences to one common real dtype.

    The common dtype is the widest of the inputs. When all of them are
    integral (or boolean) the configured floating type is used instead,
    since filtering divides by the leading denominator coefficient.
    Arrays of Python numbers (such as Fraction) stay as objects, so the
    arithmetic is done in their own exact type.
    """
    config = config or _config.default
    names = names or ['seq{}'.format(i) for i in range(len(seqs))]
    arrays = [array(s, name) for s, name in zip(seqs, names)]

    dtype = np.result_type(*arrays)
    if dtype.kind not in 'fO':  # object arrays keep exact numbers
        dtype = config.float_type

    return [x.astype(dtype, copy=False) for x in arrays]
