# src/payment_admin/models/payment_method.py
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional


class RecurringPaymentType(str, Enum):
    NOT_SUPPORTED = "NotSupported"
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"


@dataclass(frozen=True)
class PaymentMethodDescriptor:
    system_name: str
    friendly_name: str
    display_order: int = 0
    recurring_payment_type: RecurringPaymentType = RecurringPaymentType.NOT_SUPPORTED
    supports_capture: bool = False
    supports_partial_refund: bool = False
    supports_refund: bool = False
    supports_void: bool = False
    configuration_url: Optional[str] = None   # admin route of the method's settings page
    logo_file: Optional[str] = None           # e.g. "logo.png" inside Plugins/<system_name>/


@dataclass
class PaymentSettings:
    active_payment_method_system_names: List[str] = field(default_factory=list)

    @classmethod
    def from_config(cls, config) -> "PaymentSettings":
        return cls(active_payment_method_system_names=list(config.ACTIVE_PAYMENT_METHODS))


@dataclass(frozen=True)
class WorkContext:
    language: str
    store_location: str     # host base, always ends with "/"
