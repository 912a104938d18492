"""SQLAlchemy models for fundtrack database."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Project(Base):
    """Fundraising project model.

    AUTOINCREMENT tables keep SQLite from reusing the id of a deleted
    newest row.
    """

    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False, default="")
    target_amount = Column(Numeric(12, 2), nullable=False)
    target_date = Column(Date, nullable=False)


class Donation(Base):
    """Donation model.

    project_id is deliberately not a foreign key: deleting a project
    leaves its donations in place.
    """

    __tablename__ = "donations"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    amount = Column(Numeric(12, 2), nullable=False)
    donor_name = Column(String, nullable=False)
    payment_method = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    project_id = Column(Integer, nullable=False, index=True)


class Expense(Base):
    """Expense model, with the same loose project link as Donation."""

    __tablename__ = "expenses"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    project_id = Column(Integer, nullable=False, index=True)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
