# shopapi/utils/database.py

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.future import select

from shopapi.utils.ids import generate_id, utcnow

# ────────────── Base для моделей ──────────────
Base = declarative_base()

# Любая из этих ошибок означает "база недоступна" -> работаем с памятью
PERSISTENCE_ERRORS = (SQLAlchemyError, OSError)

DEFAULT_CATEGORIES = ["Electronics", "Accessories", "Home & Office"]

# ────────────── Движок и фабрика сессий ──────────────
# Создаются в configure_engine(); без DATABASE_URL остаются None
engine = None
AsyncSessionLocal = None


def configure_engine(url: str):
    """Создаёт асинхронный движок и фабрику сессий для url."""
    global engine, AsyncSessionLocal

    engine = create_async_engine(
        url,
        echo=False,  # True можно включить для отладки SQL
        pool_pre_ping=True,
    )
    AsyncSessionLocal = sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return engine


# ────────────── Инициализация базы данных ──────────────
async def init_db(url: str, log=None) -> bool:
    """
    Подключение к базе при старте:
        - без url ничего не делает, приложение живёт на памяти
        - создаёт таблицы, если их ещё нет
        - если категорий нет, добавляет категории по умолчанию
    Ошибка подключения не роняет приложение: пишем предупреждение
    и возвращаем False.
    """
    if not url:
        if log:
            log.log_warning_sync("startup", "DATABASE_URL не задан, используется хранилище в памяти")
        return False

    configure_engine(url)

    # все таблицы должны быть зарегистрированы в Base.metadata
    from shopapi.models import customer, product, order  # noqa: F401
    from shopapi.models.category import Category

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        async with AsyncSessionLocal() as session:
            result = await session.execute(select(Category.id).limit(1))
            if result.first() is None:
                for name in DEFAULT_CATEGORIES:
                    session.add(Category(id=generate_id(), name=name, created_at=utcnow()))
                await session.commit()
                if log:
                    log.log_info_sync("startup", "Созданы категории по умолчанию", {"names": DEFAULT_CATEGORIES})
    except PERSISTENCE_ERRORS as e:
        if log:
            log.log_warning_sync("startup", "База недоступна, используется хранилище в памяти", {"error": str(e)})
        return False

    return True


def row_to_dict(row) -> dict:
    """ORM-объект -> dict по колонкам таблицы (формат хранилища в памяти)."""
    return {c.name: getattr(row, c.name) for c in row.__table__.columns}


async def dispose_db():
    global engine, AsyncSessionLocal

    if engine is not None:
        await engine.dispose()
    engine = None
    AsyncSessionLocal = None
