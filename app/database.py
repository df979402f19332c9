from fastapi import Depends
from sqlmodel import SQLModel, Session, create_engine

from app.core.config import DATABASE_URL, SQL_ECHO
from app.repositories.base import SubscriptionStore
from app.repositories.sql import SqlSubscriptionStore

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)  # echo imprime las queries

def create_db_and_tables():
    # importar los modelos para que queden registrados en el metadata
    from app.models.user import User  # noqa: F401
    from app.models.subscription import Subscription  # noqa: F401
    from app.models.user_settings import UserSettings  # noqa: F401
    from app.models.savings_entry import SavingsEntry  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session

def get_store(session: Session = Depends(get_session)) -> SubscriptionStore:
    return SqlSubscriptionStore(session)
