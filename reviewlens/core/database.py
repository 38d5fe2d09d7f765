# reviewlens/core/database.py
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
    AsyncEngine,
)
from sqlalchemy.orm import declarative_base
from reviewlens.core.config import settings

Base = declarative_base()


class Database:
    def __init__(self):
        self._engine: AsyncEngine = create_async_engine(
            settings.ASYNC_DATABASE_URI,
            echo=False,
            future=True,
        )
        self._SessionLocal = async_sessionmaker(
            bind=self._engine, class_=AsyncSession, expire_on_commit=False
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def get_db(self):
        async with self._SessionLocal() as session:
            yield session


database = Database()
get_db = database.get_db
