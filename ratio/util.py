import logging
import math
import typing

import numpy as np
import numba

module_logger = logging.getLogger(__name__)


__all__ = [
    "default_domain",
    "real_types",
    "integer_type",
    "domain_type",
    "is_integer_value",
    "domain_of",
    "check_domain",
    "promote_domains",
    "lift",
    "gcd"
]


default_domain = int

# natural floating point target for each integer domain
real_types = {
    int: np.float64,
    np.int8: np.float32,
    np.int16: np.float32,
    np.int32: np.float64,
    np.int64: np.float64
}

integer_type = typing.Union[int, np.signedinteger]
domain_type = typing.Union[type, str, np.dtype]


def is_integer_value(value: typing.Any) -> bool:
    """
    Whether `value` belongs to one of the supported signed integer domains:
    a Python int (but not a bool) or a numpy signed integer scalar.
    """
    if isinstance(value, np.generic):
        return isinstance(value, np.signedinteger)
    return isinstance(value, int) and not isinstance(value, bool)


def domain_of(value: typing.Any) -> type:
    if isinstance(value, np.signedinteger):
        return type(value)
    if is_integer_value(value):
        return int
    raise TypeError(
        (f"Couldn't identify integer domain of {value} "
         f"of type {type(value)}"))


def check_domain(domain: domain_type) -> type:
    """
    Validate an explicitly requested integer domain.

    Args:
        domain (type/str/np.dtype): `int`, a numpy signed integer scalar
            type, or anything `np.dtype` understands that names one.
    Returns:
        type: the scalar type used to construct values of the domain
    """
    if domain is int:
        return int
    try:
        scalar_type = np.dtype(domain).type
    except TypeError as err:
        raise TypeError(f"{domain} is not an integer domain") from err
    if not issubclass(scalar_type, np.signedinteger):
        raise TypeError(f"{domain} is not a signed integer domain")
    return scalar_type


def promote_domains(domain_a: type, domain_b: type) -> type:
    """
    Common domain for an operation combining values of two domains.
    Unbounded Python ints adopt the fixed width domain of the other operand.
    """
    if domain_a is domain_b:
        return domain_a
    if domain_a is int:
        return domain_b
    if domain_b is int:
        return domain_a
    promoted = np.promote_types(domain_a, domain_b).type
    module_logger.debug((f"promote_domains: {domain_a.__name__}, "
                         f"{domain_b.__name__} -> {promoted.__name__}"))
    return promoted


def lift(value: integer_type, domain: type) -> integer_type:
    if domain is int:
        return int(value)
    return domain(value)


def _euclid(a, b):
    while b != 0:
        a, b = b, a % b
    return a


_gcd_kernel = numba.njit(cache=True)(_euclid)


def gcd(a: integer_type, b: integer_type) -> integer_type:
    """
    Greatest common divisor of two non-negative values of the same domain,
    with gcd(x, 0) == x.

    Fixed width domains run through the compiled kernel. Python ints are
    unbounded, which numba can't represent, so they go to `math.gcd`.
    """
    domain = domain_of(a)
    if domain is int:
        return math.gcd(a, b)
    return domain(_gcd_kernel(a, b))
