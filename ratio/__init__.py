__version__ = "0.1.0"

from . import util
from .rational import Rational, normalize, to_real

__all__ = [
    "util",
    "Rational",
    "normalize",
    "to_real"
]
