import logging
import typing

import numpy as np

from . import util

module_logger = logging.getLogger(__name__)

__all__ = [
    "Rational",
    "normalize",
    "to_real"
]


def normalize(num: util.integer_type,
              den: util.integer_type) -> typing.Tuple:
    """
    Bring a raw (num, den) pair into canonical form: lowest terms, with the
    sign carried by the numerator.

    A zero denominator leaves the pair untouched; the value is illegal and
    there is nothing sensible to divide by.

    Args:
        num: numerator, in the same integer domain as `den`
        den: denominator
    Returns:
        tuple: (num, den)
    """
    if den == 0:
        module_logger.debug(f"normalize: zero denominator, num={num}")
        return num, den
    g = util.gcd(abs(num), abs(den))
    num, den = num // g, den // g
    if den < 0:
        num, den = -num, -den
    return num, den


class Rational:
    """
    Exact ratio of two integers from a signed integer domain.

    The domain is either the builtin `int` or one of numpy's fixed width
    signed integer types, in which case overflow wraps the way numpy
    scalars do. Values are immutable and always held in canonical form, so
    structural equality is value equality.

    Division by zero doesn't raise; it yields an illegal value (zero
    denominator) that can be detected with `is_legal`.

    Truthiness follows the usual numeric convention: a Rational is true
    when its numerator is non zero.
    """

    __slots__ = ("_num", "_den", "_dtype")

    # make numpy scalars on the left hand side defer to our reflected ops
    __array_ufunc__ = None

    def __init__(self,
                 num: util.integer_type = 0,
                 den: util.integer_type = 1,
                 dtype: util.domain_type = None):
        num_domain = util.domain_of(num)
        den_domain = util.domain_of(den)
        if dtype is None:
            dtype = util.promote_domains(num_domain, den_domain)
        else:
            dtype = util.check_domain(dtype)
        self._dtype = dtype
        self._num, self._den = normalize(
            util.lift(num, dtype), util.lift(den, dtype))

    @classmethod
    def _from_raw(cls, num, den, dtype):
        self = cls.__new__(cls)
        self._num, self._den = normalize(num, den)
        self._dtype = dtype
        return self

    @classmethod
    def zero(cls, dtype: util.domain_type = util.default_domain):
        return cls(0, 1, dtype=dtype)

    @classmethod
    def from_integer(cls, value: util.integer_type):
        return cls(value, 1)

    @property
    def num(self):
        return self._num

    @property
    def den(self):
        return self._den

    @property
    def numerator(self):
        return self._num

    @property
    def denominator(self):
        return self._den

    @property
    def dtype(self) -> type:
        return self._dtype

    def is_integral(self) -> bool:
        return bool(self._den == 1)

    def is_legal(self) -> bool:
        return bool(self._den != 0)

    def astype(self, dtype: util.domain_type):
        """
        The same value carried into another integer domain.
        Narrowing follows numpy's casting rules for the target domain.
        """
        module_logger.debug((f"astype: {self!r} -> "
                             f"{util.check_domain(dtype).__name__}"))
        return type(self)(self._num, self._den, dtype=dtype)

    def _lift_operand(self, other):
        if isinstance(other, Rational):
            return other
        if util.is_integer_value(other):
            dtype = util.promote_domains(self._dtype, util.domain_of(other))
            return Rational(other, 1, dtype=dtype)
        return None

    def _operands(self, other):
        other = self._lift_operand(other)
        if other is None:
            return None
        dtype = util.promote_domains(self._dtype, other._dtype)
        return (dtype,
                util.lift(self._num, dtype), util.lift(self._den, dtype),
                util.lift(other._num, dtype), util.lift(other._den, dtype))

    def __add__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        dtype, n1, d1, n2, d2 = operands
        return self._from_raw(n1 * d2 + d1 * n2, d1 * d2, dtype)

    def __sub__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        dtype, n1, d1, n2, d2 = operands
        return self._from_raw(n1 * d2 - d1 * n2, d1 * d2, dtype)

    def __mul__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        dtype, n1, d1, n2, d2 = operands
        return self._from_raw(n1 * n2, d1 * d2, dtype)

    def __truediv__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        dtype, n1, d1, n2, d2 = operands
        return self._from_raw(n1 * d2, d1 * n2, dtype)

    def __radd__(self, other):
        other = self._lift_operand(other)
        if other is None:
            return NotImplemented
        return other + self

    def __rsub__(self, other):
        other = self._lift_operand(other)
        if other is None:
            return NotImplemented
        return other - self

    def __rmul__(self, other):
        other = self._lift_operand(other)
        if other is None:
            return NotImplemented
        return other * self

    def __rtruediv__(self, other):
        other = self._lift_operand(other)
        if other is None:
            return NotImplemented
        return other / self

    def __pos__(self):
        return self

    def __neg__(self):
        # den is never negative, so negating the numerator stays canonical
        negated = type(self).__new__(type(self))
        negated._num, negated._den, negated._dtype = (
            -self._num, self._den, self._dtype)
        return negated

    def __abs__(self):
        if self._num < 0:
            return -self
        return self

    def __eq__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        _, n1, d1, n2, d2 = operands
        return bool(n1 == n2 and d1 == d2)

    def __lt__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        _, n1, d1, n2, d2 = operands
        return bool(n1 * d2 < n2 * d1)

    def __le__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        _, n1, d1, n2, d2 = operands
        return bool(n1 * d2 <= n2 * d1)

    def __gt__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        _, n1, d1, n2, d2 = operands
        return bool(n1 * d2 > n2 * d1)

    def __ge__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        _, n1, d1, n2, d2 = operands
        return bool(n1 * d2 >= n2 * d1)

    def __hash__(self):
        if self._den == 1:
            return hash(int(self._num))
        return hash((int(self._num), int(self._den)))

    def __bool__(self):
        return bool(self._num != 0)

    def to_real(self, real_type: type = None):
        """
        Floating point approximation: the numerator cast to `real_type`,
        divided by the denominator as it is. The result type follows numpy's
        promotion of the two operands.

        Args:
            real_type (type): defaults to the natural real type of the
                integer domain, see `util.real_types`.
        Returns:
            a real number. Illegal values give whatever `real_type` gives
            for division by zero: inf or nan for numpy floats,
            ZeroDivisionError for the builtin float.
        """
        if real_type is None:
            real_type = util.real_types.get(self._dtype, np.float64)
        if not self.is_legal():
            module_logger.debug(f"to_real: illegal value {self!r}")
        with np.errstate(divide="ignore", invalid="ignore"):
            return real_type(self._num) / self._den

    def __float__(self):
        return float(self.to_real(np.float64))

    def __int__(self):
        num, den = int(self._num), int(self._den)
        quotient = abs(num) // den
        return quotient if num >= 0 else -quotient

    def __repr__(self):
        if self._dtype is int:
            return f"Rational({self._num}, {self._den})"
        return (f"Rational({self._num}, {self._den}, "
                f"dtype={self._dtype.__name__})")


def to_real(rational: Rational, real_type: type = None):
    return rational.to_real(real_type)
