from collections.abc import Mapping, Sequence
import csv
from pathlib import Path


CLEAN_COLUMNS = (
    "account_number",
    "counterparty_account",
    "transaction_type",
    "amount",
    "currency_code",
    "transaction_timestamp",
    "source_file",
    "raw_row_number",
)
REJECTED_COLUMNS = CLEAN_COLUMNS + ("errors",)


def read_raw_rows(input_path: Path) -> list[dict[str, str]]:
    if not input_path.exists():
        raise FileNotFoundError(f"input file not found: {input_path}")

    # utf-8-sig drops a leading BOM so the first header name still matches the mapping.
    with input_path.open("r", encoding="utf-8-sig", newline="") as infile:
        reader = csv.reader(infile)
        header = next(reader, None)
        if header is None:
            return []

        rows: list[dict[str, str]] = []
        for cells in reader:
            # Blank lines still count as rows; short rows pad with "" and surplus cells are dropped.
            rows.append({column: cells[index] if index < len(cells) else "" for index, column in enumerate(header)})
    return rows


def write_records_csv(path: Path, records: Sequence[Mapping[str, str]], columns: Sequence[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as outfile:
        writer = csv.writer(outfile, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(columns)
        for record in records:
            writer.writerow([record.get(column, "") for column in columns])
