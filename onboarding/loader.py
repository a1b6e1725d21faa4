from collections.abc import Mapping, Sequence
import logging

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from onboarding.db_models import Transaction
from onboarding.validation import parse_amount, parse_transaction_date


logger = logging.getLogger(__name__)


class LoadError(RuntimeError):
    pass


def to_transaction_row(record: Mapping[str, str]) -> dict[str, object]:
    return {
        "account_number": record.get("account_number", ""),
        "counterparty_account": record.get("counterparty_account", ""),
        "transaction_type": record.get("transaction_type", ""),
        "amount": parse_amount(record["amount"]),
        "currency_code": record.get("currency_code", ""),
        "transaction_timestamp": parse_transaction_date(record["transaction_timestamp"]),
        "source_file": record.get("source_file", ""),
        "raw_row_number": int(record["raw_row_number"]),
    }


def load_clean_records(session_factory: sessionmaker[Session], records: Sequence[Mapping[str, str]]) -> int:
    """Insert every clean record in one batch, or none of them."""
    rows = [to_transaction_row(record) for record in records]
    if not rows:
        return 0

    with session_factory() as db:
        try:
            db.execute(insert(Transaction), rows)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise LoadError(f"batch insert of {len(rows)} clean records rolled back: {exc}") from exc

    logger.info("clean records loaded", extra={"loaded_records": len(rows)})
    return len(rows)
