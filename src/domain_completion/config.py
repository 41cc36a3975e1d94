from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "DOMAIN_COMPLETION_"}

    # SQLite settings store
    settings_db: str = _defaults.get("settings_db", "~/.local/share/domain-completion/settings.db")

    # Bundled top domains list, resolved inside the package
    top_domains_resource: str = _defaults.get("top_domains_resource", "topdomains.txt")

    # Toggle values used until the user flips them
    default_domain_autocomplete: bool = _defaults.get("default_domain_autocomplete", True)
    default_custom_domain_autocomplete: bool = _defaults.get("default_custom_domain_autocomplete", True)

    log_level: str = _defaults.get("log_level", "info")


settings = Settings()
