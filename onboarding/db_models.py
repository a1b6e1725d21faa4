from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# Rewritten per engine through schema_translate_map, see database.build_session_factory.
STANDARD_SCHEMA = "verafin_standard"


class Base(DeclarativeBase):
    pass


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = {"schema": STANDARD_SCHEMA}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_number: Mapped[str] = mapped_column(String(16))
    counterparty_account: Mapped[str] = mapped_column(String(16))
    transaction_type: Mapped[str] = mapped_column(String(32))
    amount: Mapped[Decimal] = mapped_column(Numeric(asdecimal=True))
    currency_code: Mapped[str] = mapped_column(String(3))
    transaction_timestamp: Mapped[date] = mapped_column(Date)
    source_file: Mapped[str] = mapped_column(Text)
    raw_row_number: Mapped[int] = mapped_column(Integer)
