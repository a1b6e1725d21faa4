import argparse
import logging
from pathlib import Path
import sys

from sqlalchemy.exc import SQLAlchemyError

from onboarding.config import get_settings
from onboarding.database import build_session_factory
from onboarding.mapping import MappingConfigError, load_field_mapping
from onboarding.pipeline import OnboardingRunner


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="onboard-transactions",
        description="Standardize, validate and load a raw transaction CSV",
    )
    parser.add_argument("input_path", help="path to the raw transaction CSV")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    try:
        mapping = load_field_mapping(Path(settings.mapping_path))
    except MappingConfigError as exc:
        logger.error("cannot start onboarding: %s", exc)
        raise SystemExit(1) from exc

    try:
        session_factory = build_session_factory(settings)
    except SQLAlchemyError as exc:
        logger.error("cannot start onboarding: database unavailable: %s", exc)
        raise SystemExit(1) from exc

    runner = OnboardingRunner(settings, session_factory, mapping)
    result = runner.run(Path(args.input_path))

    print(
        "source_file={source_file} status={status} total={total} clean={clean} rejected={rejected} loaded={loaded} clean_output={clean_output} rejected_output={rejected_output}".format(
            source_file=result.source_file,
            status=result.status,
            total=result.total_records,
            clean=result.clean_records,
            rejected=result.rejected_records,
            loaded=result.loaded_records,
            clean_output=result.clean_path,
            rejected_output=result.rejected_path,
        )
    )
    if result.status == "failed":
        print(f"error: {result.error}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
