"""
Metric numerals: conversion between numbers and Metric-prefix text.

    to_metric(1000)        -> "1k"
    to_metric(0.1)         -> "100m"
    from_metric("1.5 M")   -> 1500000.0
    from_metric("2kilo")   -> 2000.0

Only the 10^(3N) prefixes from yocto (10⁻²⁴) to yotta (10²⁴) are supported;
deci, centi, deca and hecto are not.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
import warnings
from dataclasses import dataclass
from decimal import Decimal
from enum import IntFlag, StrEnum, unique
from types import MappingProxyType
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .numeric import std_numeric
from .tools import fmt_type, fmt_value


# Exceptions -----------------------------------------------------------------------------------------------------------

class MetricNumeralError(Exception):
    """Base class for all Metric numeral conversion errors."""


class NullInputError(MetricNumeralError, TypeError):
    """Metric text expected but None received."""


class InvalidNumeralError(MetricNumeralError, ValueError):
    """Text is empty or not in the form {number}, {number}{symbol} or {number} {symbol}."""


class OutOfRangeError(MetricNumeralError, ValueError):
    """Number magnitude cannot be expressed with a supported Metric prefix."""


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitPrefix:
    """
    Textual forms of a single Metric prefix.

    Attributes:
        name: Prefix name, e.g. "kilo".
        short_scale_word: Short-scale numeral word, e.g. "billion" for giga.
        long_scale_word: Long-scale numeral word, e.g. "milliard" for giga.
            Defaults to short_scale_word where both scales agree.
    """
    name: str
    short_scale_word: str
    long_scale_word: str | None = None

    def __post_init__(self):
        if self.long_scale_word is None:
            object.__setattr__(self, "long_scale_word", self.short_scale_word)


# @formatter:off

class MetricConf:
    """
    Constants for Metric numeral conversion.

    Attributes:
        BIG_LIMIT: Exclusive upper bound of |value| accepted by to_metric(), 10²⁷.
        SMALL_LIMIT: Exclusive lower bound of non-zero |value| accepted by to_metric(), 10⁻²⁷.
        SIGNIFICANT_DIGITS: Significant digits of a prefixed number in to_metric() output.
        MAX_DECIMALS: Largest rounding precision accepted by to_metric().
        PREFIX_STEPS: Prefix symbol ↔ signed power-of-1000 step, e.g. 'k' ↔ 1, 'm' ↔ -1.
        UNIT_PREFIXES: Prefix symbol → UnitPrefix. Iteration order is the order
            in which from_metric() substitutes prefix names by symbols.
        SYMBOL_ALIASES: Alternative spellings of symbols accepted on input,
            the micro sign 'µ' (U+00B5) stands for Greek 'μ' (U+03BC).
    """

    BIG_LIMIT = 1e27
    SMALL_LIMIT = 1e-27

    SIGNIFICANT_DIGITS = 15
    MAX_DECIMALS = 15

    PREFIX_STEPS = FrozenBiMap({
        "k": 1,  "M": 2,  "G": 3,  "T": 4,  "P": 5,  "E": 6,  "Z": 7,  "Y": 8,
        "m": -1, "μ": -2, "n": -3, "p": -4, "f": -5, "a": -6, "z": -7, "y": -8,
    })

    UNIT_PREFIXES = MappingProxyType({
        "Y": UnitPrefix("yotta", "septillion", "quadrillion"),
        "Z": UnitPrefix("zetta", "sextillion", "trilliard"),
        "E": UnitPrefix("exa", "quintillion", "trillion"),
        "P": UnitPrefix("peta", "quadrillion", "billiard"),
        "T": UnitPrefix("tera", "trillion", "billion"),
        "G": UnitPrefix("giga", "billion", "milliard"),
        "M": UnitPrefix("mega", "million"),
        "k": UnitPrefix("kilo", "thousand"),
        "m": UnitPrefix("milli", "thousandth"),
        "μ": UnitPrefix("micro", "millionth"),
        "n": UnitPrefix("nano", "billionth", "milliardth"),
        "p": UnitPrefix("pico", "trillionth", "billionth"),
        "f": UnitPrefix("femto", "quadrillionth", "billiardth"),
        "a": UnitPrefix("atto", "quintillionth", "trillionth"),
        "z": UnitPrefix("zepto", "sextillionth", "trilliardth"),
        "y": UnitPrefix("yocto", "septillionth", "quadrillionth"),
    })

    SYMBOL_ALIASES = MappingProxyType({"µ": "μ"})

# @formatter:on


@unique
class UnitText(StrEnum):
    """
    Which text follows the number in to_metric() output.

    Attributes:
        SYMBOL: Prefix symbol - "1k"
        NAME: Prefix name - "1kilo"
        SHORT_SCALE_WORD: Short-scale numeral word - "1thousand", "1billion"
        LONG_SCALE_WORD: Long-scale numeral word - "1thousand", "1milliard"
    """
    SYMBOL = "symbol"
    NAME = "name"
    SHORT_SCALE_WORD = "short_scale_word"
    LONG_SCALE_WORD = "long_scale_word"


class MetricFlag(IntFlag):
    """
    Bitwise-combinable format flags, an alternative to MetricFormat.

    Examples:
        >>> to_metric(1000, MetricFlag.USE_NAME | MetricFlag.WITH_SPACE)
        '1 kilo'

    Warning:
        USE_NAME, USE_SHORT_SCALE_WORD and USE_LONG_SCALE_WORD select the same
        thing and only one of them takes effect. When combined, the winner is
        picked in the fixed order USE_NAME > USE_SHORT_SCALE_WORD > USE_LONG_SCALE_WORD
        and a UserWarning is emitted. Prefer MetricFormat, which cannot express
        such combinations.
    """
    NONE = 0
    WITH_SPACE = 1
    USE_NAME = 2
    USE_SHORT_SCALE_WORD = 4
    USE_LONG_SCALE_WORD = 8


_SELECTOR_PRIORITY = (
    (MetricFlag.USE_NAME, UnitText.NAME),
    (MetricFlag.USE_SHORT_SCALE_WORD, UnitText.SHORT_SCALE_WORD),
    (MetricFlag.USE_LONG_SCALE_WORD, UnitText.LONG_SCALE_WORD),
)


@dataclass(frozen=True)
class MetricFormat:
    """
    Formatting controls for to_metric() output.

    Attributes:
        unit_text: Text appended after the number, see UnitText. Accepts the
            enum member or its string value.
        with_space: Insert a single space between the number and the unit text.

    Examples:
        >>> to_metric(2e9, MetricFormat.long_scale(with_space=True))
        '2 milliard'
        >>> to_metric(2e9, MetricFormat(unit_text="short_scale_word"))
        '2billion'

    Raises:
        ValueError: If unit_text is not a UnitText value.
        TypeError: If with_space is not a bool.
    """
    unit_text: UnitText = UnitText.SYMBOL
    with_space: bool = False

    def __post_init__(self):
        """Validate and normalize fields"""
        try:
            unit_text = UnitText(self.unit_text)
        except ValueError:
            raise ValueError(f"unit_text expected one of {[u.value for u in UnitText]} "
                             f"but found {fmt_value(self.unit_text)}") from None
        object.__setattr__(self, "unit_text", unit_text)

        if not isinstance(self.with_space, bool):
            raise TypeError(f"with_space must be bool, but got {fmt_type(self.with_space)}")

    @classmethod
    def symbol(cls, with_space: bool = False) -> Self:
        return cls(unit_text=UnitText.SYMBOL, with_space=with_space)

    @classmethod
    def name(cls, with_space: bool = False) -> Self:
        return cls(unit_text=UnitText.NAME, with_space=with_space)

    @classmethod
    def short_scale(cls, with_space: bool = False) -> Self:
        return cls(unit_text=UnitText.SHORT_SCALE_WORD, with_space=with_space)

    @classmethod
    def long_scale(cls, with_space: bool = False) -> Self:
        return cls(unit_text=UnitText.LONG_SCALE_WORD, with_space=with_space)

    @classmethod
    def from_flags(cls, flags: MetricFlag | int) -> Self:
        """
        Build a MetricFormat from MetricFlag bits.

        With several unit-text selectors set, the first of USE_NAME, USE_SHORT_SCALE_WORD,
        USE_LONG_SCALE_WORD wins and a UserWarning is emitted. No selector means symbol.

        Raises:
            TypeError: If flags is not an int.
            ValueError: If flags is negative.
        """
        if isinstance(flags, bool) or not isinstance(flags, int):
            raise TypeError(f"flags must be MetricFlag | int, but got {fmt_type(flags)}")
        if flags < 0:
            raise ValueError(f"flags must be non-negative, but got {fmt_value(flags)}")

        flags = MetricFlag(flags)
        selected = [unit_text for flag, unit_text in _SELECTOR_PRIORITY if flag in flags]
        if len(selected) > 1:
            warnings.warn(
                f"Multiple unit text selectors in {flags!r}, using {selected[0].value!r}",
                UserWarning,
                stacklevel=2
            )
        unit_text = selected[0] if selected else UnitText.SYMBOL
        return cls(unit_text=unit_text, with_space=MetricFlag.WITH_SPACE in flags)


# Methods --------------------------------------------------------------------------------------------------------------

def to_metric(
        value,
        fmt: MetricFormat | MetricFlag | int | None = None,
        decimals: int | None = None,
) -> str:
    """
    Convert a number into a human-readable Metric representation.

    The magnitude picks the power-of-1000 bucket; values in [1, 1000) get no prefix.
    A prefixed number is shown with up to 15 significant digits. If rounding pushes
    the number to 1000 it moves to the next prefix, so 999999.9 with decimals=0
    becomes "1M" rather than "1000k".

    Args:
        value: Real number - int, float, Decimal, Fraction or a NumPy-like scalar.
        fmt: MetricFormat, MetricFlag bits, or None for the bare symbol without space.
        decimals: Round the displayed number to this many decimal places, 0 to 15.

    Returns:
        Metric representation. Zero is always "0", without unit text or space.
        Unprefixed values get a trailing space if fmt asks for one.

    Raises:
        OutOfRangeError: If value is non-finite, |value| >= 10²⁷ or 0 < |value| <= 10⁻²⁷.
        TypeError: If value is not a real number, or fmt or decimals has a wrong type.
        ValueError: If decimals is out of range.

    Examples:
        >>> to_metric(1000)
        '1k'
        >>> to_metric(123)
        '123'
        >>> to_metric(0.1)
        '100m'
        >>> to_metric(1234.5678, MetricFormat.name(with_space=True), decimals=2)
        '1.23 kilo'
    """
    number = std_numeric(value)
    if number is None:
        raise TypeError(f"value must be a real number, but got {fmt_type(value)}")

    fmt = _resolve_format(fmt)
    decimals = _validate_decimals(decimals)

    if number == 0:
        return "0"

    if _is_out_of_range(number):
        raise OutOfRangeError(
            f"value magnitude must be within ({MetricConf.SMALL_LIMIT:g}, {MetricConf.BIG_LIMIT:g}) "
            f"or zero, but got {fmt_value(value)}"
        )

    return _build_representation(float(number), fmt, decimals)


def from_metric(text: str) -> float:
    """
    Convert a Metric representation into a number.

    Accepted forms are {number}, {number}{symbol} and {number} {symbol}. Prefix names
    are turned into symbols first, so "1kilo" and "1 kilo" work too. The substitution
    is a plain substring replacement over the whole text, a name anywhere in the text
    is replaced. Scale words ("thousand", "milliard") are not recognized.

    Args:
        text: Metric representation, surrounding whitespace is ignored.

    Returns:
        The number as float.

    Raises:
        NullInputError: If text is None.
        TypeError: If text is not a str.
        InvalidNumeralError: If text is empty or not a Metric numeral.

    Examples:
        >>> from_metric("1k")
        1000.0
        >>> from_metric("123")
        123.0
        >>> from_metric("100m")
        0.1
    """
    cleaned = _clean_representation(text)
    return _build_number(cleaned, cleaned[-1])


def is_metric_numeral(text: str | None) -> bool:
    """
    Check whether from_metric() would accept the text.

    Returns False for None, empty or malformed text.

    Raises:
        TypeError: If text is neither str nor None.
    """
    try:
        _clean_representation(text)
    except MetricNumeralError:
        return False
    return True


def unit_prefix(symbol: str) -> UnitPrefix:
    """
    Return the UnitPrefix of a Metric prefix symbol, 'µ' is accepted for 'μ'.

    Raises:
        TypeError: If symbol is not a str.
        KeyError: If symbol is not a supported prefix.
    """
    if not isinstance(symbol, str):
        raise TypeError(f"symbol must be str, but got {fmt_type(symbol)}")
    try:
        return MetricConf.UNIT_PREFIXES[_canonical_symbol(symbol)]
    except KeyError:
        raise KeyError(f"unknown Metric prefix symbol {fmt_value(symbol)}") from None


def get_unit_text(symbol: str, fmt: MetricFormat | MetricFlag | int | None = None) -> str:
    """
    Get the unit text of a prefix symbol as selected by fmt.

    Returns:
        The prefix name, short-scale word, long-scale word or the symbol itself.

    Examples:
        >>> get_unit_text("G", MetricFormat.long_scale())
        'milliard'
        >>> get_unit_text("µ")
        'μ'
    """
    prefix = unit_prefix(symbol)
    fmt = _resolve_format(fmt)

    if fmt.unit_text == UnitText.NAME:
        return prefix.name
    if fmt.unit_text == UnitText.SHORT_SCALE_WORD:
        return prefix.short_scale_word
    if fmt.unit_text == UnitText.LONG_SCALE_WORD:
        return prefix.long_scale_word
    return _canonical_symbol(symbol)


# Private Methods ------------------------------------------------------------------------------------------------------

_DECIMAL_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_MAX_STEP = max(MetricConf.PREFIX_STEPS.values())


def _canonical_symbol(symbol: str) -> str:
    return MetricConf.SYMBOL_ALIASES.get(symbol, symbol)


def _is_symbol(char: str) -> bool:
    return _canonical_symbol(char) in MetricConf.PREFIX_STEPS


def _resolve_format(fmt) -> MetricFormat:
    if fmt is None:
        return MetricFormat()
    if isinstance(fmt, MetricFormat):
        return fmt
    if isinstance(fmt, int) and not isinstance(fmt, bool):
        return MetricFormat.from_flags(fmt)
    raise TypeError(f"fmt must be MetricFormat | MetricFlag | None, but got {fmt_type(fmt)}")


def _validate_decimals(decimals) -> int | None:
    if decimals is None:
        return None
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be int | None, but got {fmt_type(decimals)}")
    if not 0 <= decimals <= MetricConf.MAX_DECIMALS:
        raise ValueError(f"decimals must be in range [0, {MetricConf.MAX_DECIMALS}], but got {decimals}")
    return decimals


def _is_out_of_range(number: int | float) -> bool:
    """Non-zero number outside the open intervals (-BIG, -SMALL) and (SMALL, BIG), or non-finite."""
    try:
        magnitude = abs(float(number))
    except OverflowError:
        return True
    if not math.isfinite(magnitude):
        return True
    return not (MetricConf.SMALL_LIMIT < magnitude < MetricConf.BIG_LIMIT)


def _build_representation(number: float, fmt: MetricFormat, decimals: int | None) -> str:
    # Bucket below yocto still uses yocto, e.g. 1e-25 is "0.1y"
    exponent = math.floor(math.log10(abs(number)) / 3)
    exponent = max(-_MAX_STEP, min(_MAX_STEP, exponent))

    if exponent == 0:
        if decimals is not None:
            number = round(number, decimals)
        return _plain_str(number) + (" " if fmt.with_space else "")

    return _build_metric_representation(number, exponent, fmt, decimals)


def _build_metric_representation(number: float, exponent: int, fmt: MetricFormat, decimals: int | None) -> str:
    if exponent > 0:
        scaled = number / 1000 ** exponent
    else:
        scaled = number * 1000 ** -exponent

    if decimals is not None:
        scaled = round(scaled, decimals)

    if abs(scaled) >= 1000 and exponent < _MAX_STEP:
        scaled /= 1000
        exponent += 1

    representation = f"{scaled:.{MetricConf.SIGNIFICANT_DIGITS}g}"
    if fmt.with_space:
        representation += " "

    # Rounding 999.9...m up lands on the unprefixed bucket
    if exponent == 0:
        return representation

    return representation + get_unit_text(MetricConf.PREFIX_STEPS.get_key(exponent), fmt)


def _plain_str(number: float) -> str:
    """Shortest round-trip text, whole floats without the trailing '.0'"""
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _clean_representation(text: str | None) -> str:
    if text is None:
        raise NullInputError("text must be str, but got None")
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")

    cleaned = _replace_name_by_symbol(text.strip())
    if not cleaned or _is_invalid_metric_numeral(cleaned):
        raise InvalidNumeralError(f"empty or invalid Metric numeral {fmt_value(text)}")

    return cleaned.replace(" ", "")


def _replace_name_by_symbol(text: str) -> str:
    for symbol, prefix in MetricConf.UNIT_PREFIXES.items():
        text = text.replace(prefix.name, symbol)
    return text


def _is_invalid_metric_numeral(text: str) -> bool:
    """
    Valid text is a decimal number optionally followed by one prefix symbol,
    whitespace between them allowed.
    """
    body = text[:-1] if _is_symbol(text[-1]) else text
    return _parse_decimal(body) is None


def _parse_decimal(text: str) -> float | None:
    text = text.strip()
    if not _DECIMAL_NUMBER.fullmatch(text):
        return None
    return float(text)


def _build_number(text: str, last: str) -> float:
    if last.isalpha():
        return _build_metric_number(text, last)
    return float(text)


def _build_metric_number(text: str, last: str) -> float:
    # Exact decimal scaling, float() rounds once
    exponent = 3 * MetricConf.PREFIX_STEPS[_canonical_symbol(last)]
    return float(Decimal(text[:-1]).scaleb(exponent))


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Ensure every prefix symbol has both an exponent step and textual forms.
if set(MetricConf.PREFIX_STEPS.keys()) != set(MetricConf.UNIT_PREFIXES.keys()):
    raise AssertionError(
        "Configuration Error: The symbols of PREFIX_STEPS and UNIT_PREFIXES must be identical."
    )
