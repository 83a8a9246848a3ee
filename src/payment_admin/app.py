from flask import Flask
from payment_admin.config import Config, configure_logging
from payment_admin.api.routes import api
from payment_admin.models.payment_method import PaymentSettings
from payment_admin.services.providers import default_registry


def create_app(config=Config, registry=None):
    app = Flask(__name__)
    app.config.from_object(config)
    app.extensions['payment_admin.config'] = config
    configure_logging(app.config['LOG_LEVEL'])

    app.extensions['payment_admin'] = registry or default_registry(PaymentSettings.from_config(config))
    app.register_blueprint(api)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=Config.DEBUG)
