import logging
import os


def _split(raw):
    return [part.strip() for part in raw.split(",") if part.strip()]


class Config:
    SECRET_KEY = os.getenv("PAYMENT_ADMIN_SECRET_KEY", "your_secret_key")
    DEBUG = os.getenv("PAYMENT_ADMIN_DEBUG", "true").lower() == "true"  # Set to False in production
    LOG_LEVEL = os.getenv("PAYMENT_ADMIN_LOG_LEVEL", "INFO").upper()

    # Grid paging
    DEFAULT_GRID_PAGE_SIZE = int(os.getenv("PAYMENT_ADMIN_GRID_PAGE_SIZE", "15"))
    GRID_PAGE_SIZES = os.getenv("PAYMENT_ADMIN_GRID_PAGE_SIZES", "10, 15, 20, 50, 100")

    # Localization
    DEFAULT_LANGUAGE = os.getenv("PAYMENT_ADMIN_DEFAULT_LANGUAGE", "en")
    SUPPORTED_LANGUAGES = _split(os.getenv("PAYMENT_ADMIN_LANGUAGES", "en,de,fr"))

    # Methods not listed here are shown as inactive
    ACTIVE_PAYMENT_METHODS = _split(
        os.getenv("PAYMENT_ADMIN_ACTIVE_METHODS", "Payments.CheckMoneyOrder,Payments.Manual")
    )


def configure_logging(level: str = Config.LOG_LEVEL) -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
