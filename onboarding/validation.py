from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
import re


ACCOUNT_PATTERN = re.compile(r"[0-9]{8,16}")
# Plain base-10 literal: no NaN, Infinity or underscore separators.
AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(frozen=True)
class ValidationRules:
    allowed_transaction_types: tuple[str, ...] = ("WIRE", "ACH", "DEPOSIT")
    allowed_currency_codes: tuple[str, ...] = ("CAD", "USD")


DEFAULT_RULES = ValidationRules()


def parse_amount(value: str) -> Decimal:
    if not AMOUNT_PATTERN.fullmatch(value):
        raise ValueError(f"not a decimal amount: {value!r}")
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal amount: {value!r}") from exc


def parse_transaction_date(value: str) -> date:
    """Parse a strict ``yyyy-MM-dd`` calendar date.

    Out of range parts such as month 13 or 2024-02-30 raise ``ValueError``
    instead of rolling over into the next month.
    """
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"not a yyyy-MM-dd date: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def validate_record(record: Mapping[str, str], rules: ValidationRules = DEFAULT_RULES) -> list[str]:
    errors: list[str] = []

    if not ACCOUNT_PATTERN.fullmatch(record.get("account_number", "")):
        errors.append("account_number must be 8-16 digits")

    counterparty = record.get("counterparty_account", "")
    if counterparty and not ACCOUNT_PATTERN.fullmatch(counterparty):
        errors.append("counterparty_account must be 8-16 digits or blank")

    if record.get("transaction_type", "") not in rules.allowed_transaction_types:
        allowed = ", ".join(rules.allowed_transaction_types)
        errors.append(f"transaction_type must be one of {{{allowed}}}")

    try:
        amount = parse_amount(record.get("amount", ""))
    except ValueError:
        errors.append("amount must be numeric")
    else:
        if amount < 0:
            errors.append("amount cannot be negative")

    if record.get("currency_code", "") not in rules.allowed_currency_codes:
        allowed = " or ".join(rules.allowed_currency_codes)
        errors.append(f"currency_code must be {allowed}")

    try:
        parse_transaction_date(record.get("transaction_timestamp", ""))
    except ValueError:
        errors.append("transaction_timestamp must be yyyy-MM-dd")

    return errors
