from .serializers import (
    OptionTypeSerializer,
    OptionValueSerializer,
    VariantSerializer,
    PriceSerializer,
)

__all__ = [
    'OptionTypeSerializer',
    'OptionValueSerializer',
    'VariantSerializer',
    'PriceSerializer',
]
