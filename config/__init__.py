import os

_ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Dotted path of the settings module.

    SETTINGS_MODULE wins when set; otherwise APP_ENV picks production or
    testing, and anything else falls back to development.
    """

    explicit = os.getenv("SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit
    return _ENVIRONMENTS.get(os.getenv("APP_ENV", "development").strip().lower(), "config.development")
