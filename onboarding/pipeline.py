from collections.abc import Iterable, Mapping
import logging
from pathlib import Path

from sqlalchemy.orm import Session, sessionmaker

from onboarding.config import Settings
from onboarding.csv_io import CLEAN_COLUMNS, REJECTED_COLUMNS, read_raw_rows, write_records_csv
from onboarding.loader import load_clean_records
from onboarding.mapping import apply_mapping
from onboarding.schemas import OnboardingResult, PartitionResult
from onboarding.validation import DEFAULT_RULES, ValidationRules, validate_record


logger = logging.getLogger(__name__)


def partition_records(
    raw_rows: Iterable[Mapping[str, str]],
    mapping: Mapping[str, str],
    source_file: str,
    rules: ValidationRules = DEFAULT_RULES,
) -> PartitionResult:
    """Map and validate every raw row, routing each to the clean or rejected list.

    Row numbers start at 1 for the first data row and are assigned before the
    split, so both lists together always cover 1..N in input order.
    """
    result = PartitionResult()
    for row_number, raw in enumerate(raw_rows, start=1):
        record = apply_mapping(raw, mapping)
        errors = validate_record(record, rules)
        record["source_file"] = source_file
        record["raw_row_number"] = str(row_number)
        if errors:
            record["errors"] = "; ".join(errors)
            result.rejected.append(record)
        else:
            result.clean.append(record)
    return result


class OnboardingRunner:
    def __init__(
        self,
        settings: Settings,
        session_factory: sessionmaker[Session],
        mapping: Mapping[str, str],
        rules: ValidationRules = DEFAULT_RULES,
    ) -> None:
        self.settings = settings
        self.session_factory = session_factory
        self.mapping = mapping
        self.rules = rules

    def run(self, input_path: Path) -> OnboardingResult:
        source_file = input_path.name
        output_root = Path(self.settings.output_dir)
        clean_path = output_root / "clean.csv"
        rejected_path = output_root / "rejected.csv"

        partition = PartitionResult()
        loaded_records = 0
        try:
            raw_rows = read_raw_rows(input_path)
            partition = partition_records(raw_rows, self.mapping, source_file, self.rules)

            write_records_csv(clean_path, partition.clean, CLEAN_COLUMNS)
            write_records_csv(rejected_path, partition.rejected, REJECTED_COLUMNS)

            loaded_records = load_clean_records(self.session_factory, partition.clean)
        except Exception as exc:
            logger.exception("onboarding run failed", extra={"source_file": source_file})
            return self._result(
                source_file,
                "failed",
                partition,
                loaded_records,
                clean_path,
                rejected_path,
                error=str(exc),
            )

        logger.info(
            "onboarding run completed: %d clean rows inserted, %d rejected",
            loaded_records,
            len(partition.rejected),
            extra={"source_file": source_file},
        )
        return self._result(source_file, "succeeded", partition, loaded_records, clean_path, rejected_path)

    def _result(
        self,
        source_file: str,
        status: str,
        partition: PartitionResult,
        loaded_records: int,
        clean_path: Path,
        rejected_path: Path,
        error: str | None = None,
    ) -> OnboardingResult:
        return OnboardingResult(
            source_file=source_file,
            status=status,
            total_records=partition.total_records,
            clean_records=len(partition.clean),
            rejected_records=len(partition.rejected),
            loaded_records=loaded_records,
            clean_path=str(clean_path),
            rejected_path=str(rejected_path),
            error=error,
        )
