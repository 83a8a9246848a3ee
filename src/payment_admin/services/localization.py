# src/payment_admin/services/localization.py
import logging
from typing import Dict, Mapping, Optional

from payment_admin.errors import MissingResourceError
from payment_admin.models.payment_method import RecurringPaymentType

logger = logging.getLogger(__name__)


RECURRING_PAYMENT_TYPE_RESOURCES: Dict[RecurringPaymentType, str] = {
    RecurringPaymentType.NOT_SUPPORTED: "Enums.RecurringPaymentType.NotSupported",
    RecurringPaymentType.MANUAL: "Enums.RecurringPaymentType.Manual",
    RecurringPaymentType.AUTOMATIC: "Enums.RecurringPaymentType.Automatic",
}

_unmapped = set(RecurringPaymentType) - set(RECURRING_PAYMENT_TYPE_RESOURCES)
if _unmapped:
    raise RuntimeError(f"RecurringPaymentType members without a resource key: {sorted(_unmapped)}")


DEFAULT_RESOURCES: Dict[str, Dict[str, str]] = {
    "en": {
        "Enums.RecurringPaymentType.NotSupported": "Not supported",
        "Enums.RecurringPaymentType.Manual": "Manual",
        "Enums.RecurringPaymentType.Automatic": "Automatic",
    },
    "de": {
        "Enums.RecurringPaymentType.NotSupported": "Nicht unterstützt",
        "Enums.RecurringPaymentType.Manual": "Manuell",
        "Enums.RecurringPaymentType.Automatic": "Automatisch",
    },
    "fr": {
        "Enums.RecurringPaymentType.NotSupported": "Non pris en charge",
        "Enums.RecurringPaymentType.Manual": "Manuel",
        "Enums.RecurringPaymentType.Automatic": "Automatique",
    },
}


class LocalizationResolver:
    """
    Resolves resource keys to display strings.

    Lookup order is the requested locale, then the default locale. A key
    missing from both raises `MissingResourceError`.
    """

    def __init__(
        self,
        resources: Optional[Mapping[str, Mapping[str, str]]] = None,
        default_locale: str = "en",
    ) -> None:
        self.resources = resources if resources is not None else DEFAULT_RESOURCES
        self.default_locale = default_locale

    def label(self, key: str, locale: str) -> str:
        for candidate in (locale, self.default_locale):
            value = self.resources.get(candidate, {}).get(key)
            if value is not None:
                if candidate != locale:
                    logger.debug("Resource %s missing for %s, using %s", key, locale, candidate)
                return value
        raise MissingResourceError(key, locale)

    def recurring_payment_type(self, value: RecurringPaymentType, locale: str) -> str:
        return self.label(RECURRING_PAYMENT_TYPE_RESOURCES[value], locale)
