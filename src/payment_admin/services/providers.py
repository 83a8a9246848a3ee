# src/payment_admin/services/providers.py
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Set

from payment_admin.models.country import Country
from payment_admin.models.payment_method import (
    PaymentMethodDescriptor,
    PaymentSettings,
    RecurringPaymentType,
)
from payment_admin.services.localization import LocalizationResolver
from payment_admin.utils.helpers import join_url


class CountryProvider(Protocol):
    def get_all(self, include_hidden: bool = False) -> List[Country]: ...


class PaymentMethodProvider(Protocol):
    def get_all(self) -> List[PaymentMethodDescriptor]: ...

    def get_restricted_country_ids(self, method: PaymentMethodDescriptor) -> Set[int]: ...


class InMemoryCountryProvider:
    def __init__(self, countries: Iterable[Country] = ()):
        self._countries = list(countries)

    def get_all(self, include_hidden: bool = False) -> List[Country]:
        countries = sorted(self._countries, key=lambda c: (c.display_order, c.name))
        if include_hidden:
            return countries
        return [c for c in countries if c.published]


class InMemoryPaymentMethodProvider:
    """
    Keeps registered payment methods in registration order, together with
    the set of country ids each method is restricted from.
    """

    def __init__(self) -> None:
        self._methods: Dict[str, PaymentMethodDescriptor] = {}
        self._restrictions: Dict[str, Set[int]] = {}

    def register(
        self,
        method: PaymentMethodDescriptor,
        restricted_country_ids: Iterable[int] = (),
    ) -> None:
        if method.system_name in self._methods:
            raise ValueError(f"Payment method '{method.system_name}' is already registered.")
        self._methods[method.system_name] = method
        self._restrictions[method.system_name] = set(restricted_country_ids)

    def get_all(self) -> List[PaymentMethodDescriptor]:
        return list(self._methods.values())

    def get_restricted_country_ids(self, method: PaymentMethodDescriptor) -> Set[int]:
        # copy so callers can't change stored restrictions
        return set(self._restrictions.get(method.system_name, ()))


class ActiveMethodPolicy:
    def __init__(self, settings: PaymentSettings):
        self.settings = settings

    def is_active(self, method: PaymentMethodDescriptor) -> bool:
        return method.system_name in self.settings.active_payment_method_system_names


class AssetResolver:
    PLUGINS_PATH = "Plugins"

    def logo_url(self, method: PaymentMethodDescriptor, host_base: str) -> Optional[str]:
        if not method.logo_file:
            return None
        return join_url(host_base, self.PLUGINS_PATH, method.system_name, method.logo_file)


@dataclass
class PaymentRegistry:
    """Everything a `PaymentModelFactory` needs apart from the work context."""

    countries: CountryProvider
    payment_methods: PaymentMethodProvider
    settings: PaymentSettings
    localization: LocalizationResolver = field(default_factory=LocalizationResolver)
    assets: AssetResolver = field(default_factory=AssetResolver)

    @property
    def active_policy(self) -> ActiveMethodPolicy:
        return ActiveMethodPolicy(self.settings)


def default_registry(settings: Optional[PaymentSettings] = None) -> PaymentRegistry:
    """
    Demo data set: a handful of countries (one hidden) and the usual
    built-in payment methods.
    """
    countries = InMemoryCountryProvider([
        Country(id=1, name="United States", two_letter_iso_code="US", display_order=1),
        Country(id=2, name="Canada", two_letter_iso_code="CA", display_order=2),
        Country(id=3, name="Germany", two_letter_iso_code="DE", display_order=3),
        Country(id=4, name="France", two_letter_iso_code="FR", display_order=4),
        Country(id=5, name="Bouvet Island", two_letter_iso_code="BV", published=False, display_order=100),
    ])

    methods = InMemoryPaymentMethodProvider()
    methods.register(
        PaymentMethodDescriptor(
            system_name="Payments.CheckMoneyOrder",
            friendly_name="Check / Money Order",
            display_order=1,
            configuration_url="Admin/PaymentCheckMoneyOrder/Configure",
            logo_file="logo.jpg",
        ),
    )
    methods.register(
        PaymentMethodDescriptor(
            system_name="Payments.Manual",
            friendly_name="Credit Card",
            display_order=2,
            recurring_payment_type=RecurringPaymentType.MANUAL,
            supports_capture=True,
            supports_refund=True,
            supports_partial_refund=True,
            supports_void=True,
            configuration_url="Admin/PaymentManual/Configure",
            logo_file="logo.png",
        ),
        restricted_country_ids={5},
    )
    methods.register(
        PaymentMethodDescriptor(
            system_name="Payments.PayPalStandard",
            friendly_name="PayPal Standard",
            display_order=3,
            supports_refund=True,
            supports_partial_refund=True,
            configuration_url="Admin/PaymentPayPalStandard/Configure",
            logo_file="logo.jpg",
        ),
        restricted_country_ids={3, 5},
    )
    methods.register(
        PaymentMethodDescriptor(
            system_name="Payments.PurchaseOrder",
            friendly_name="Purchase Order",
            display_order=4,
            recurring_payment_type=RecurringPaymentType.AUTOMATIC,
        ),
        restricted_country_ids={2, 4},
    )

    return PaymentRegistry(
        countries=countries,
        payment_methods=methods,
        settings=settings or PaymentSettings(
            active_payment_method_system_names=["Payments.CheckMoneyOrder", "Payments.Manual"]
        ),
    )
