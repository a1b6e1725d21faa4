from pathlib import Path

import pytest
from sqlalchemy.orm import Session, sessionmaker

from onboarding.config import Settings
from onboarding.database import build_session_factory
from onboarding.pipeline import OnboardingRunner


FIELD_MAPPING = {
    "acct": "account_number",
    "cp": "counterparty_account",
    "type": "transaction_type",
    "amt": "amount",
    "ccy": "currency_code",
    "ts": "transaction_timestamp",
}


@pytest.fixture()
def temp_workspace(tmp_path: Path) -> Path:
    (tmp_path / "data" / "input").mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture()
def field_mapping() -> dict[str, str]:
    return dict(FIELD_MAPPING)


@pytest.fixture()
def test_settings(temp_workspace: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{temp_workspace / 'test.db'}",
        db_user="",
        db_password="",
        db_schema=None,
        output_dir=str(temp_workspace / "data" / "output"),
        mapping_path=str(temp_workspace / "field_mappings.json"),
        log_level="INFO",
    )


@pytest.fixture()
def session_factory(test_settings: Settings) -> sessionmaker[Session]:
    return build_session_factory(test_settings)


@pytest.fixture()
def runner(test_settings: Settings, session_factory: sessionmaker[Session], field_mapping: dict[str, str]) -> OnboardingRunner:
    return OnboardingRunner(test_settings, session_factory, field_mapping)
