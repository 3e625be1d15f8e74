from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.sql_executor import SqlAlchemySqlExecutor
from src.app.query.list_query_executor import ListQueryExecutor
from src.app.query.paginator import Paginator


def create_engine(config) -> AsyncEngine:
    return create_async_engine(config.DB_URI, echo=config.DB_ECHO, future=True)


def create_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def get_session(request: Request) -> AsyncSession:
    async with request.app.state.session_factory() as session:
        yield session


def build_list_executor(session: AsyncSession, config) -> ListQueryExecutor:
    return ListQueryExecutor(
        SqlAlchemySqlExecutor(session),
        paginator=Paginator(default_limit=config.DEFAULT_PAGE_LIMIT),
        max_limit=config.MAX_PAGE_LIMIT,
    )
