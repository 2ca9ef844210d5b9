import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from fittrack.core.config import DATABASE_URL
from fittrack.core.errors import Conflict, FitTrackError, InternalError

logger = logging.getLogger(__name__)

# Для SQLite разрешаем использование соединения из потоков FastAPI
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Создаём подключение к БД
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовый класс для моделей
Base = declarative_base()


# Функция для получения сессии БД (используется в Depends)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Создаёт недостающие таблицы (для разработки и тестов; в проде Alembic)."""
    import fittrack.models  # noqa: F401  регистрируем все модели в метаданных

    Base.metadata.create_all(bind=bind or engine)


@contextmanager
def transaction(db: Session, action: str, conflict_message: str | None = None):
    """
    Все операции внутри блока фиксируются одним коммитом или откатываются целиком.
    IntegrityError превращается в Conflict (если задан conflict_message), иначе в InternalError.
    """
    try:
        yield db
        db.commit()
    except FitTrackError:
        db.rollback()
        raise
    except IntegrityError as exc:
        db.rollback()
        if conflict_message:
            logger.warning(f"⚠️ {action}: нарушено ограничение уникальности ({exc.orig})")
            raise Conflict(conflict_message)
        logger.exception(f"❌ {action}: нарушена целостность данных")
        raise InternalError(f"Failed to {action}")
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"❌ {action}: ошибка БД")
        raise InternalError(f"Failed to {action}")
