"""
Quick database connectivity check: prints how many tokens are stored.

    python -m backend.check_db
"""
from sqlalchemy import func
from sqlmodel import Session, select

from backend.app.core.database import create_db_and_tables, engine
from backend.app.models.Token import Token


def count_tokens(session: Session) -> int:
    return session.exec(select(func.count()).select_from(Token)).one()


def main():
    create_db_and_tables()
    with Session(engine) as session:
        print(f"Tokens in DB: {count_tokens(session)}")


if __name__ == "__main__":
    main()
