import re
from decimal import Decimal, InvalidOperation

from django.db import models
from django.db.models.query_utils import DeferredAttribute
from django.utils import formats


def parse_price(value, separator=None):
    """
    Normalize a price typed by a person into a Decimal.

    Strings keep only digits, the minus sign and the locale decimal separator
    (currency symbols and thousands separators are dropped), then the separator
    is turned into a '.'. Non-strings are returned untouched. If nothing
    parseable is left the original string comes back so field validation can
    reject it.
    """
    if not isinstance(value, str):
        return value

    if separator is None:
        separator = formats.get_format('DECIMAL_SEPARATOR')

    cleaned = re.sub(r'[^0-9\-' + re.escape(separator) + ']', '', value)
    if separator != '.':
        cleaned = cleaned.replace(separator, '.')

    try:
        return Decimal(cleaned)
    except InvalidOperation:
        return value


class PriceDescriptor(DeferredAttribute):
    def __set__(self, instance, value):
        attname = self.field.attname
        # None and blank strings leave the current value in place
        if value is None or (isinstance(value, str) and not value.strip()):
            instance.__dict__.setdefault(attname, None)
            return
        instance.__dict__[attname] = parse_price(value)


class PriceField(models.DecimalField):
    """DecimalField that also accepts locale-formatted price strings on assignment."""
    descriptor_class = PriceDescriptor
