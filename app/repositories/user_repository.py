from abc import ABC, abstractmethod
from typing import List
from sqlalchemy import create_engine, select, func
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.models import User
from core.utils.date import Date, date as default_date
from database.migrations.create_users import Base, UserRecord
import threading, logging

logger = logging.getLogger(__name__)

SEED_USERS = [
    ('Alice', 'alice@example.com'),
    ('Bob', 'bob@example.com'),
    ('Charlie', 'charlie@example.com'),
]

class UserStore(ABC):

    @abstractmethod
    def list ( self ) -> List[User]: ...

    @abstractmethod
    def append ( self, name: str, email: str ) -> User: ...

    def count ( self ) -> int:

        return len(self.list())

    def seed ( self ):

        for name, email in SEED_USERS: self.append(name, email)
        return self

class MemoryUserStore(UserStore):
    """Process-lifetime user list. Ids are assigned as count + 1 under a lock."""

    def __init__ ( self, date: Date = None, seed: bool = True ):

        self.date  = date or default_date
        self.lock  = threading.Lock()
        self.users = []

        if seed: self.seed()

    def list ( self ):

        with self.lock: return list(self.users)

    def count ( self ):

        with self.lock: return len(self.users)

    def append ( self, name: str, email: str ):

        with self.lock:

            user = User(id=len(self.users) + 1, name=name, email=email, created_at=self.date.now_iso())
            self.users.append(user)

        return user

class DatabaseUserStore(UserStore):

    def __init__ ( self, url: str = 'sqlite://', echo: bool = False, date: Date = None, seed: bool = True ):

        self.date = date or default_date
        options = {'echo': echo}

        if url.startswith('sqlite') and url.rstrip('/') in ('sqlite:', 'sqlite://', 'sqlite:///:memory:'):
            options.update(connect_args={'check_same_thread': False}, poolclass=StaticPool)

        self.engine  = create_engine(url, **options)
        self.session = sessionmaker(bind=self.engine, expire_on_commit=False)

        Base.metadata.create_all(self.engine)
        if seed and self.count() == 0: self.seed()

    def _to_user ( self, record: UserRecord ):

        return User(id=record.id, name=record.name, email=record.email, created_at=record.created_at)

    def list ( self ):

        with self.session() as session:
            records = session.scalars(select(UserRecord).order_by(UserRecord.id)).all()

        return [self._to_user(r) for r in records]

    def count ( self ):

        with self.session() as session:
            return session.scalar(select(func.count()).select_from(UserRecord)) or 0

    def append ( self, name: str, email: str ):

        with self.session.begin() as session:

            record = UserRecord(name=name, email=email, created_at=self.date.now_iso())
            session.add(record)
            session.flush()

            user = self._to_user(record)

        return user

def make_store ( driver: str = 'memory', url: str = 'sqlite://', echo: bool = False, date: Date = None ):

    driver = str(driver or 'memory').lower().strip()
    logger.info("user store: %s", driver)

    if driver == 'memory': return MemoryUserStore(date=date)
    if driver in ('database', 'db', 'sql'): return DatabaseUserStore(url=url, echo=echo, date=date)

    raise ValueError(f"Unknown user store driver: {driver}")
