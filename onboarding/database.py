from sqlalchemy import URL, create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from onboarding.config import Settings
from onboarding.db_models import STANDARD_SCHEMA, Base


def build_database_url(settings: Settings) -> URL:
    url = make_url(settings.database_url)
    if url.get_backend_name() == "sqlite":
        return url
    # Credentials embedded in DB_URL take precedence over DB_USER / DB_PASS.
    return url.set(
        username=url.username or settings.db_user or None,
        password=url.password or settings.db_password or None,
    )


def build_session_factory(settings: Settings) -> sessionmaker[Session]:
    url = build_database_url(settings)
    connect_args: dict[str, object] = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False

    engine = create_engine(
        url,
        future=True,
        connect_args=connect_args,
        execution_options={"schema_translate_map": {STANDARD_SCHEMA: settings.db_schema}},
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
