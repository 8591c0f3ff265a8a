from .decoder import decode_currencies, decode_latest_rates, raise_for_error_envelope
from .locale import parse_date, parse_decimal

__all__ = ['decode_currencies', 'decode_latest_rates', 'raise_for_error_envelope', 'parse_date', 'parse_decimal']
