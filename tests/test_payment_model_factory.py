import unittest
from payment_admin.api.schemas import (
    PaymentMethodRestrictionModel,
    PaymentMethodSearchModel,
    PaymentMethodsModel,
)
from payment_admin.config import Config
from payment_admin.errors import InvalidArgument, MissingResourceError
from payment_admin.models.country import Country
from payment_admin.models.payment_method import (
    PaymentMethodDescriptor,
    PaymentSettings,
    RecurringPaymentType,
    WorkContext,
)
from payment_admin.services.localization import LocalizationResolver
from payment_admin.services.payment_model_factory import PaymentModelFactory
from payment_admin.services.providers import (
    InMemoryCountryProvider,
    InMemoryPaymentMethodProvider,
    PaymentRegistry,
)


class GridConfig(Config):
    DEFAULT_GRID_PAGE_SIZE = 2
    GRID_PAGE_SIZES = "2, 5, 10"


class FailingCountryProvider:
    def get_all(self, include_hidden=False):
        raise ConnectionError("country store unavailable")


def build_registry():
    countries = InMemoryCountryProvider([
        Country(id=i, name=f"Country {i}", display_order=i, published=(i != 5)) for i in range(1, 6)
    ])
    methods = InMemoryPaymentMethodProvider()
    methods.register(
        PaymentMethodDescriptor(
            system_name="A",
            friendly_name="Method A",
            display_order=1,
            configuration_url="Admin/A/Configure",
            logo_file="logo.png",
            supports_refund=True,
        ),
        restricted_country_ids={2, 4},
    )
    methods.register(
        PaymentMethodDescriptor(
            system_name="B",
            friendly_name="Method B",
            display_order=2,
            recurring_payment_type=RecurringPaymentType.MANUAL,
        ),
    )
    methods.register(
        PaymentMethodDescriptor(
            system_name="C",
            friendly_name="Method C",
            display_order=3,
            recurring_payment_type=RecurringPaymentType.AUTOMATIC,
        ),
        restricted_country_ids={5},
    )
    return PaymentRegistry(
        countries=countries,
        payment_methods=methods,
        settings=PaymentSettings(active_payment_method_system_names=["A", "C"]),
    )


class TestPaymentModelFactory(unittest.TestCase):

    def setUp(self):
        self.registry = build_registry()
        self.factory = PaymentModelFactory(
            self.registry,
            WorkContext(language="en", store_location="http://shop.test/"),
            config=GridConfig,
        )

    # list model

    def test_first_page(self):
        model = self.factory.prepare_list_model(PaymentMethodSearchModel(page=0, page_size=2))
        self.assertEqual([row.system_name for row in model.data], ["A", "B"])
        self.assertEqual(model.total, 3)

    def test_second_page(self):
        model = self.factory.prepare_list_model(PaymentMethodSearchModel(page=1, page_size=2))
        self.assertEqual([row.system_name for row in model.data], ["C"])
        self.assertEqual(model.total, 3)

    def test_page_past_end(self):
        model = self.factory.prepare_list_model(PaymentMethodSearchModel(page=5, page_size=2))
        self.assertEqual(model.data, [])
        self.assertEqual(model.total, 3)

    def test_zero_page_size_gives_empty_page(self):
        model = self.factory.prepare_list_model(PaymentMethodSearchModel(page=0, page_size=0))
        self.assertEqual(model.data, [])
        self.assertEqual(model.total, 3)

    def test_page_never_exceeds_page_size(self):
        for size in range(1, 5):
            for index in range(4):
                model = self.factory.prepare_list_model(PaymentMethodSearchModel(page=index, page_size=size))
                self.assertLessEqual(len(model.data), size)
                self.assertEqual(model.total, 3)

    def test_same_parameters_same_order(self):
        search = PaymentMethodSearchModel(page=0, page_size=3)
        first = self.factory.prepare_list_model(search)
        second = self.factory.prepare_list_model(search)
        self.assertEqual(first, second)

    def test_rows_are_enriched(self):
        model = self.factory.prepare_list_model(PaymentMethodSearchModel(page=0, page_size=3))
        a, b, c = model.data

        self.assertTrue(a.is_active)
        self.assertFalse(b.is_active)
        self.assertTrue(c.is_active)

        self.assertEqual(a.configuration_url, "Admin/A/Configure")
        self.assertIsNone(b.configuration_url)

        self.assertEqual(a.logo_url, "http://shop.test/Plugins/A/logo.png")
        self.assertIsNone(b.logo_url)

        self.assertEqual(a.recurring_payment_type, "Not supported")
        self.assertEqual(b.recurring_payment_type, "Manual")
        self.assertEqual(c.recurring_payment_type, "Automatic")

        self.assertEqual(a.friendly_name, "Method A")
        self.assertTrue(a.supports_refund)

    def test_recurring_type_uses_work_context_language(self):
        factory = PaymentModelFactory(
            self.registry,
            WorkContext(language="de", store_location="http://shop.test/"),
        )
        model = factory.prepare_list_model(PaymentMethodSearchModel(page=0, page_size=3))
        self.assertEqual([row.recurring_payment_type for row in model.data],
                         ["Nicht unterstützt", "Manuell", "Automatisch"])

    def test_missing_resource_propagates(self):
        self.registry.localization = LocalizationResolver({"en": {}})
        with self.assertRaises(MissingResourceError):
            self.factory.prepare_list_model(PaymentMethodSearchModel(page=0, page_size=3))

    def test_list_model_requires_search_model(self):
        with self.assertRaises(InvalidArgument):
            self.factory.prepare_list_model(None)

    # search model

    def test_prepare_search_model(self):
        search = self.factory.prepare_search_model(PaymentMethodSearchModel(page=4))
        self.assertEqual(search.page, 0)
        self.assertEqual(search.page_size, 2)
        self.assertEqual(search.available_page_sizes, "2, 5, 10")

    def test_search_model_required(self):
        with self.assertRaises(InvalidArgument):
            self.factory.prepare_search_model(None)

    # restriction model

    def test_restriction_matrix(self):
        model = self.factory.prepare_restriction_model(PaymentMethodRestrictionModel())
        self.assertEqual(model.restricted["A"], {1: False, 2: True, 3: False, 4: True, 5: False})
        self.assertEqual(model.restricted["B"], {1: False, 2: False, 3: False, 4: False, 5: False})
        self.assertTrue(model.is_restricted("C", 5))

    def test_restriction_matrix_is_complete(self):
        model = self.factory.prepare_restriction_model(PaymentMethodRestrictionModel())
        countries = self.registry.countries.get_all(include_hidden=True)
        for method in self.registry.payment_methods.get_all():
            restricted_ids = self.registry.payment_methods.get_restricted_country_ids(method)
            for country in countries:
                self.assertEqual(model.restricted[method.system_name][country.id], country.id in restricted_ids)

    def test_restriction_model_includes_hidden_countries(self):
        model = self.factory.prepare_restriction_model(PaymentMethodRestrictionModel())
        self.assertEqual([c.id for c in model.available_countries], [1, 2, 3, 4, 5])
        self.assertFalse(model.available_countries[-1].published)

    def test_restriction_model_lists_methods(self):
        model = self.factory.prepare_restriction_model(PaymentMethodRestrictionModel())
        self.assertEqual([m.system_name for m in model.available_payment_methods], ["A", "B", "C"])

    def test_restriction_model_required(self):
        with self.assertRaises(InvalidArgument):
            self.factory.prepare_restriction_model(None)

    def test_preparing_restriction_model_twice_replaces_contents(self):
        model = PaymentMethodRestrictionModel()
        self.factory.prepare_restriction_model(model)
        self.factory.prepare_restriction_model(model)
        self.assertEqual([m.system_name for m in model.available_payment_methods], ["A", "B", "C"])
        self.assertEqual(len(model.available_countries), 5)
        self.assertEqual(set(model.restricted), {"A", "B", "C"})

    def test_provider_failure_leaves_model_untouched(self):
        self.registry.countries = FailingCountryProvider()
        model = PaymentMethodRestrictionModel()
        with self.assertRaises(ConnectionError):
            self.factory.prepare_restriction_model(model)
        self.assertEqual(model, PaymentMethodRestrictionModel())

    # overview

    def test_methods_overview(self):
        container = PaymentMethodsModel()
        result = self.factory.prepare_methods_overview(container)

        self.assertIs(result, container)
        self.assertEqual(container.payments_method.page_size, 2)
        self.assertEqual([row.system_name for row in container.payment_method_list.data], ["A", "B"])
        self.assertEqual(container.payment_method_list.total, 3)
        self.assertEqual(set(container.payment_method_restriction.restricted), {"A", "B", "C"})

    def test_methods_overview_requires_container(self):
        with self.assertRaises(InvalidArgument):
            self.factory.prepare_methods_overview(None)

    def test_methods_overview_missing_nested_model_mutates_nothing(self):
        container = PaymentMethodsModel(payment_method_restriction=None)
        with self.assertRaises(InvalidArgument):
            self.factory.prepare_methods_overview(container)
        self.assertEqual(container.payments_method, PaymentMethodSearchModel())
        self.assertIsNone(container.payment_method_list)

    def test_methods_overview_missing_search_model_mutates_nothing(self):
        container = PaymentMethodsModel(payments_method=None)
        with self.assertRaises(InvalidArgument):
            self.factory.prepare_methods_overview(container)
        self.assertEqual(container.payment_method_restriction, PaymentMethodRestrictionModel())
        self.assertIsNone(container.payment_method_list)

    def test_methods_overview_starts_at_first_page(self):
        container = PaymentMethodsModel(payments_method=PaymentMethodSearchModel(page=3))
        self.factory.prepare_methods_overview(container)
        self.assertEqual(container.payments_method.page, 0)
        self.assertEqual([row.system_name for row in container.payment_method_list.data], ["A", "B"])

    def test_methods_overview_failure_leaves_container_untouched(self):
        self.registry.countries = FailingCountryProvider()
        container = PaymentMethodsModel(payments_method=PaymentMethodSearchModel(page=1, page_size=7))
        with self.assertRaises(ConnectionError):
            self.factory.prepare_methods_overview(container)
        self.assertEqual(container.payments_method, PaymentMethodSearchModel(page=1, page_size=7))
        self.assertIsNone(container.payment_method_list)
        self.assertEqual(container.payment_method_restriction, PaymentMethodRestrictionModel())

if __name__ == '__main__':
    unittest.main()
