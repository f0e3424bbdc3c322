"""Configuration class."""

import numpy as np


class Configuration:
    float_type = 'float64'  # integral inputs are promoted to this type
    fill_value = np.nan  # smoother output where the window is incomplete

    def __init__(self, **kwargs):
        self.__dict__.update(**kwargs)

        self.float_type = np.dtype(self.float_type)
        assert self.float_type.kind == 'f'


default = Configuration()
