"""
Payment method model factory for the admin area.

Builds the view models shown on the payment methods admin page:

- the paged list of installed payment methods, enriched with presentation
  fields (active flag, configuration URL, logo URL, localized recurring
  payment type)
- the country restriction matrix (which method may not be used in which
  country)
- the overview container holding both

The factory only reads from its collaborators. Nothing here is cached
between requests; build a new factory per request with that request's
`WorkContext`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from payment_admin.api.schemas import (
    CountryModel,
    PaymentMethodListModel,
    PaymentMethodModel,
    PaymentMethodRestrictionModel,
    PaymentMethodSearchModel,
    PaymentMethodsModel,
)
from payment_admin.config import Config
from payment_admin.errors import require
from payment_admin.models.country import Country
from payment_admin.models.payment_method import PaymentMethodDescriptor, WorkContext
from payment_admin.services.providers import PaymentRegistry
from payment_admin.utils.helpers import paginate

logger = logging.getLogger(__name__)


@dataclass
class _Restriction:
    countries: List[CountryModel]
    methods: List[PaymentMethodModel]
    restricted: Dict[str, Dict[int, bool]]


class PaymentModelFactory:
    """
    Prepares payment method view models from a `PaymentRegistry`.

    Every public method checks its argument first and raises
    `InvalidArgument` when it is missing; the private builders below can
    assume their inputs are present.
    """

    def __init__(
        self,
        registry: PaymentRegistry,
        work_context: WorkContext,
        config: type = Config,
    ) -> None:
        self.registry = registry
        self.work_context = work_context
        self.config = config
        self._active_policy = registry.active_policy

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def prepare_methods_overview(self, methods_model: PaymentMethodsModel) -> PaymentMethodsModel:
        """
        Prepare the payment methods page: grid parameters, the first page
        of the grid and the restriction matrix.

        The container and both nested models must be present; if any is
        missing nothing is touched. Everything is built before the
        container is updated, so a failing collaborator leaves it as it was.
        """
        require(methods_model, "methods_model")
        require(methods_model.payments_method, "methods_model.payments_method")
        require(methods_model.payment_method_restriction, "methods_model.payment_method_restriction")

        search_model = self.prepare_search_model(methods_model.payments_method.model_copy())
        first_page = self.prepare_list_model(search_model)
        restriction = self._build_restriction()

        self._apply_grid_parameters(methods_model.payments_method)
        methods_model.payment_method_list = first_page
        self._apply_restriction(methods_model.payment_method_restriction, restriction)

        return methods_model

    def prepare_search_model(self, search_model: PaymentMethodSearchModel) -> PaymentMethodSearchModel:
        """Set the grid page parameters on `search_model`, starting at the first page."""
        require(search_model, "search_model")

        self._apply_grid_parameters(search_model)

        return search_model

    def prepare_list_model(self, search_model: PaymentMethodSearchModel) -> PaymentMethodListModel:
        """
        Prepare one page of the payment method grid.

        `total` is always the number of methods before paging; a page past
        the end comes back empty.
        """
        require(search_model, "search_model")

        methods = self.registry.payment_methods.get_all()
        page = paginate(methods, search_model.page, search_model.page_size)

        logger.debug(
            "Prepared payment method page %s (size %s): %s of %s methods",
            search_model.page, search_model.page_size, len(page), len(methods),
        )
        return PaymentMethodListModel(
            data=[self._prepare_method_row(method) for method in page],
            total=len(methods),
        )

    def prepare_restriction_model(
        self, model: PaymentMethodRestrictionModel
    ) -> PaymentMethodRestrictionModel:
        """
        Prepare the method/country restriction matrix.

        Hidden countries are included: a method can be restricted in a
        country that isn't shown on the storefront. The model is only
        updated once the whole matrix is built, and preparing it again
        replaces the previous contents.
        """
        require(model, "model")

        self._apply_restriction(model, self._build_restriction())
        return model

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    def _apply_grid_parameters(self, search_model: PaymentMethodSearchModel) -> None:
        search_model.page = 0
        search_model.page_size = self.config.DEFAULT_GRID_PAGE_SIZE
        search_model.available_page_sizes = self.config.GRID_PAGE_SIZES

    def _build_restriction(self) -> _Restriction:
        countries = self.registry.countries.get_all(include_hidden=True)
        methods = self.registry.payment_methods.get_all()

        available_methods: List[PaymentMethodModel] = []
        restricted: Dict[str, Dict[int, bool]] = {}
        for method in methods:
            available_methods.append(self._to_model(method))
            restricted[method.system_name] = self._restriction_row(method, countries)

        logger.debug(
            "Prepared restriction matrix: %s methods x %s countries", len(methods), len(countries)
        )
        return _Restriction(
            countries=[self._country_to_model(country) for country in countries],
            methods=available_methods,
            restricted=restricted,
        )

    @staticmethod
    def _apply_restriction(model: PaymentMethodRestrictionModel, restriction: _Restriction) -> None:
        model.available_countries = restriction.countries
        model.available_payment_methods = restriction.methods
        model.restricted = restriction.restricted

    def _prepare_method_row(self, method: PaymentMethodDescriptor) -> PaymentMethodModel:
        row = self._to_model(method)

        # values that are not stored on the descriptor
        row.is_active = self._active_policy.is_active(method)
        row.configuration_url = method.configuration_url
        row.logo_url = self.registry.assets.logo_url(method, self.work_context.store_location)
        row.recurring_payment_type = self.registry.localization.recurring_payment_type(
            method.recurring_payment_type, self.work_context.language
        )
        return row

    def _restriction_row(self, method: PaymentMethodDescriptor, countries: List[Country]) -> Dict[int, bool]:
        restricted_ids = self.registry.payment_methods.get_restricted_country_ids(method)
        return {country.id: country.id in restricted_ids for country in countries}

    @staticmethod
    def _to_model(method: PaymentMethodDescriptor) -> PaymentMethodModel:
        return PaymentMethodModel(
            system_name=method.system_name,
            friendly_name=method.friendly_name,
            display_order=method.display_order,
            supports_capture=method.supports_capture,
            supports_partial_refund=method.supports_partial_refund,
            supports_refund=method.supports_refund,
            supports_void=method.supports_void,
        )

    @staticmethod
    def _country_to_model(country: Country) -> CountryModel:
        return CountryModel(
            id=country.id,
            name=country.name,
            two_letter_iso_code=country.two_letter_iso_code,
            published=country.published,
        )
