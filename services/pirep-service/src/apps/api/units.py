# services/pirep-service/src/apps/api/units.py
"""
Unit Presentation

Reports store one canonical unit per quantity (nautical miles, pounds).
API responses fan each value out to the units clients display.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional, Union

Number = Union[Decimal, int, float, str]

KM_PER_NMI = Decimal('1.852')
MI_PER_NMI = Decimal('1.150779')
KG_PER_LB = Decimal('0.45359237')

TWO_PLACES = Decimal('0.01')


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def _to_decimal(value: Optional[Number]) -> Decimal:
    if value is None:
        return Decimal('0')
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def distance_units(nmi: Optional[Number]) -> Dict[str, float]:
    """Nautical miles to {nmi, km, mi}."""
    value = _to_decimal(nmi)
    return {
        'nmi': float(_quantize(value)),
        'km': float(_quantize(value * KM_PER_NMI)),
        'mi': float(_quantize(value * MI_PER_NMI)),
    }


def fuel_units(lbs: Optional[Number]) -> Dict[str, float]:
    """Pounds to {lbs, kg}."""
    value = _to_decimal(lbs)
    return {
        'lbs': float(_quantize(value)),
        'kg': float(_quantize(value * KG_PER_LB)),
    }
