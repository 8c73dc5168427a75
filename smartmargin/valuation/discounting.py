"""Discount factor calculation for swap pricing."""

from datetime import date

from smartmargin.curves.base import Curve


def get_discount_factor(
    payment_date: date,
    curve: Curve,
    valuation_date: date,
) -> float:
    """Discount factor from ``valuation_date`` to ``payment_date``.

    Args:
        payment_date: Date of the payment
        curve: Discount curve
        valuation_date: Date the value is expressed at

    Returns:
        Discount factor from valuation_date to payment_date
    """
    df_payment = curve.df(payment_date)

    # DF(valuation -> payment) = DF(ref -> payment) / DF(ref -> valuation)
    if valuation_date != curve.reference_date:
        df_valuation = curve.df(valuation_date)
        return df_payment / df_valuation

    return df_payment
