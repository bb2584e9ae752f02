from .fractions import compute_fractions
from .gradient1d import Gradient1D

__all__ = ['compute_fractions', 'Gradient1D']
