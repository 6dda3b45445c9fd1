from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.processor.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    bb_url: str = ""
    bb_username: str = ""
    bb_keyname: str = ""
    bb_scheme: str = "http"
    bb_timeout_seconds: int = 30
    bb_verify_tls: bool = True

    input_file: Path = Path("input_files/SP_Decision_Sheet_Dummy.xlsx")
    output_dir: Path = Path("output_files")

    spreadsheet_engine: str = "auto"
    render_engine: str = "pymupdf"
    screenshot_width: int = 1280

    report_title: str = "Bitbucket Access Evidence Collection Report"
    log_file: Path | None = None


REQUIRED_AUTHORITY_SETTINGS: dict[str, str] = {
    "bb_url": "BB_URL",
    "bb_username": "BB_USERNAME",
    "bb_keyname": "BB_KEYNAME",
}


def require_authority_settings(settings: Settings) -> None:
    """Fail fast when Bitbucket credentials are missing.

    Raises:
        ConfigurationError: naming every missing environment variable.
    """
    missing = [
        env_name
        for field_name, env_name in REQUIRED_AUTHORITY_SETTINGS.items()
        if not str(getattr(settings, field_name)).strip()
    ]
    if missing:
        raise ConfigurationError(
            f"Missing Bitbucket environment variables: {', '.join(missing)}. "
            "Add them to .env"
        )
