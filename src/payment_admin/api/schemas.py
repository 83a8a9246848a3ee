from pydantic import BaseModel, Field
from typing import Dict, List, Optional


class PaymentMethodModel(BaseModel):
    system_name: str
    friendly_name: str
    display_order: int = 0
    is_active: bool = False
    configuration_url: Optional[str] = None
    logo_url: Optional[str] = None
    recurring_payment_type: Optional[str] = None    # localized label
    supports_capture: bool = False
    supports_partial_refund: bool = False
    supports_refund: bool = False
    supports_void: bool = False


class CountryModel(BaseModel):
    id: int
    name: str
    two_letter_iso_code: str = ""
    published: bool = True


class PaymentMethodSearchModel(BaseModel):
    page: int = 0           # zero-based page index
    page_size: int = 0
    available_page_sizes: str = ""


class PaymentMethodListModel(BaseModel):
    data: List[PaymentMethodModel] = Field(default_factory=list)
    total: int = 0


class PaymentMethodRestrictionModel(BaseModel):
    available_countries: List[CountryModel] = Field(default_factory=list)
    available_payment_methods: List[PaymentMethodModel] = Field(default_factory=list)
    # system name -> country id -> restricted?
    restricted: Dict[str, Dict[int, bool]] = Field(default_factory=dict)

    def is_restricted(self, system_name: str, country_id: int) -> bool:
        return self.restricted[system_name][country_id]


class PaymentMethodsModel(BaseModel):
    payments_method: Optional[PaymentMethodSearchModel] = Field(default_factory=PaymentMethodSearchModel)
    payment_method_restriction: Optional[PaymentMethodRestrictionModel] = Field(
        default_factory=PaymentMethodRestrictionModel
    )
    # first page of the grid, filled in by the factory
    payment_method_list: Optional[PaymentMethodListModel] = None


class ErrorResponseSchema(BaseModel):
    detail: str
