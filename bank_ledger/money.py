"""Exact decimal helpers for balances and amounts.

Every amount entering the ledger goes through :func:`to_decimal`, so binary
floats never reach a balance. Arithmetic runs in :data:`EXACT_CONTEXT`,
which has the maximum precision the platform allows and traps ``Inexact``:
an operation that would have to round raises instead.
"""

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, Inexact, InvalidOperation

EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, Inexact],
)

ZERO = Decimal("0")


def to_decimal(value: Decimal | int | str) -> Decimal:
    """Coerce caller input to an exact ``Decimal``.

    Parameters
    ----------
    value : Decimal | int | str
        Amount to coerce. Strings must be valid decimal literals.

    Returns
    -------
    Decimal
        The value, unchanged in scale (``"1000.12345"`` keeps five places).

    Raises
    ------
    TypeError
        For floats, booleans and any other unsupported type.
    ValueError
        For malformed or non-finite decimal strings.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(
            f"Cannot use {type(value).__name__} {value!r} as an amount; pass a Decimal, int or str"
        )
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal amount: {value!r}") from exc
    else:
        raise TypeError(f"Unsupported amount type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return result


def add(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of two decimals."""
    return EXACT_CONTEXT.add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    """Exact difference of two decimals."""
    return EXACT_CONTEXT.subtract(a, b)


def to_plain_string(value: Decimal) -> str:
    """Render a decimal without exponent notation.

    ``Decimal("1E+3")`` renders as ``"1000"`` and ``Decimal("900.12345")``
    as ``"900.12345"``.
    """
    return format(value, "f")


def to_amount(value: Decimal | int | str) -> Decimal:
    """Coerce a debit, credit or transfer amount; zero is allowed.

    Raises
    ------
    ValueError
        If the amount is negative.
    """
    result = to_decimal(value)
    if result < 0:
        raise ValueError(f"Amount must not be negative: {to_plain_string(result)}")
    return result
