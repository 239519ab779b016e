"""
Standardize numeric types from Python stdlib and third-party libraries.

Lets the Metric formatter accept any real-valued scalar: Python int and float,
Decimal, Fraction, and array scalars from NumPy-like libraries.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_numeric(value, *, allow_bool: bool = False) -> int | float | None:
    """
    Convert numeric types to standard Python int, float, or None.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float/None, Decimal,
        Fraction, and third-party types via __index__, .item() or __float__.

    allow_bool : bool, default False
        If True, convert bool to int (True→1, False→0). Default False helps
        catch bugs since bool is subclass of int in Python.

    Returns
    -------
    int
        For Python int, types implementing __index__ (NumPy integers), or
        integer-valued Decimal/Fraction (e.g., Decimal('42.0') → 42).

    float
        For float values and float-like types, including inf/-inf/nan.

    None
        For None input.

    Raises
    ------
    TypeError
        For unsupported types (str, bytes, list, ...) or for bool when allow_bool=False.

    Examples
    --------
    >>> std_numeric(42)
    42
    >>> from decimal import Decimal
    >>> std_numeric(Decimal('42.0'))
    42
    >>> std_numeric(Decimal('0.5'))
    0.5
    >>> std_numeric("1k")
    Traceback (most recent call last):
        ...
    TypeError: unsupported numeric type: <type: str>...
    """
    if value is None:
        return None

    if isinstance(value, bool):
        if allow_bool:
            return int(value)
        raise TypeError(
            f"boolean values not supported, got {value}. "
            f"Set allow_bool=True to convert booleans to int (True→1, False→0)"
        )

    # Fast path, Python int has arbitrary precision
    if isinstance(value, (int, float)):
        return value

    # Text is never numeric here, even though str has no __float__
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError(f"unsupported numeric type: {fmt_type(value)}, expected a real number")

    # NumPy integers and other exact integer types
    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Array/tensor scalars
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            return std_numeric(result, allow_bool=allow_bool)
        if isinstance(result, (int, float)):
            return result

    # Integer-valued Decimal/Fraction keep arbitrary precision
    if type(value).__name__ in ("Decimal", "Fraction") and hasattr(value, "__int__"):
        try:
            as_int = int(value)
            if value == type(value)(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            pass

    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, None, or types implementing __index__, __float__ or .item()"
    )
