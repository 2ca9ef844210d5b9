import logging
import sqlite3

from sqlalchemy import event
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


# SQLite по умолчанию не проверяет внешние ключи, включаем на каждом соединении,
# чтобы порядок каскадных удалений проверялся так же, как в Postgres
@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    logger.debug("🔗 PRAGMA foreign_keys=ON для нового SQLite-соединения")
