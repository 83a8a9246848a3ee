from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from payment_admin.api.schemas import (
    ErrorResponseSchema,
    PaymentMethodRestrictionModel,
    PaymentMethodSearchModel,
    PaymentMethodsModel,
)
from payment_admin.errors import InvalidArgument
from payment_admin.models.payment_method import WorkContext
from payment_admin.services.payment_model_factory import PaymentModelFactory

api = Blueprint('payment_admin', __name__)


def _factory():
    config = current_app.config
    language = request.accept_languages.best_match(
        config['SUPPORTED_LANGUAGES'], default=config['DEFAULT_LANGUAGE']
    )
    work_context = WorkContext(language=language, store_location=request.host_url)
    return PaymentModelFactory(
        current_app.extensions['payment_admin'],
        work_context,
        config=current_app.extensions['payment_admin.config'],
    )


@api.errorhandler(InvalidArgument)
@api.errorhandler(ValidationError)
def bad_request(error):
    return jsonify(ErrorResponseSchema(detail=str(error)).model_dump()), 400


@api.route('/payment/methods', methods=['GET'])
def methods_overview():
    model = _factory().prepare_methods_overview(PaymentMethodsModel())
    return jsonify(model.model_dump()), 200


@api.route('/payment/methods/list', methods=['GET', 'POST'])
def methods_list():
    factory = _factory()
    params = request.get_json(silent=True) or request.args.to_dict()
    if not isinstance(params, dict):
        raise InvalidArgument("params", "Page parameters must be a JSON object.")

    search_model = factory.prepare_search_model(PaymentMethodSearchModel())
    search_model = PaymentMethodSearchModel.model_validate(
        {**search_model.model_dump(), **{k: v for k, v in params.items() if k in ('page', 'page_size')}}
    )
    model = factory.prepare_list_model(search_model)
    return jsonify(model.model_dump()), 200


@api.route('/payment/restrictions', methods=['GET'])
def restrictions():
    model = _factory().prepare_restriction_model(PaymentMethodRestrictionModel())
    return jsonify(model.model_dump()), 200
