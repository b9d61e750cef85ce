"""Database engine, session configuration and schema bootstrap."""

from collections.abc import Generator

from sqlalchemy import create_engine, event, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from arcade.config import settings
from arcade.core.asset import NOBODY_PLAYER_ID, NOTHING_ITEM_ID, NOWHERE_ROOM_ID
from arcade.core.logging import get_logger
from arcade.core.timestamp import to_db, utcnow
from arcade.db.models import Base, ItemModel, PlayerModel, RoomModel

logger = get_logger(__name__)


def create_db_engine(url: str, **kwargs) -> Engine:
    """Create an engine; SQLite connections get foreign keys enforced."""
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    db_engine = create_engine(url, **kwargs)

    if db_engine.dialect.name == "sqlite":

        @event.listens_for(db_engine, "connect")
        def _set_fk(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and ensure it is closed after use.

    Usage as a FastAPI dependency::

        @router.get("/v1/player")
        def list_players(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(db_engine: Engine) -> None:
    """Create missing tables and seed the sentinel rows."""
    Base.metadata.create_all(bind=db_engine)
    with Session(db_engine) as session:
        seed_sentinels(session)


def seed_sentinels(session: Session) -> None:
    """Insert Nobody, Nowhere and Nothing unless they already exist.

    The sentinel player and room reference each other, so the player goes in
    first without a home and is pointed at Nowhere once the room exists.
    """
    if session.get(PlayerModel, NOBODY_PLAYER_ID) is not None:
        return

    now = to_db(utcnow())
    session.execute(
        insert(PlayerModel).values(
            id=NOBODY_PLAYER_ID,
            name="Nobody",
            description="A person of no importance.",
            home_id=None,
            location_id=None,
            created=now,
            updated=now,
        )
    )
    session.execute(
        insert(RoomModel).values(
            id=NOWHERE_ROOM_ID,
            name="Nowhere",
            description="A place of no importance.",
            owner_id=NOBODY_PLAYER_ID,
            parent_id=NOWHERE_ROOM_ID,
            created=now,
            updated=now,
        )
    )
    session.execute(
        update(PlayerModel)
        .where(PlayerModel.id == NOBODY_PLAYER_ID)
        .values(home_id=NOWHERE_ROOM_ID, location_id=NOWHERE_ROOM_ID)
    )
    session.execute(
        insert(ItemModel).values(
            id=NOTHING_ITEM_ID,
            name="Nothing",
            description="A thing of no importance.",
            owner_id=NOBODY_PLAYER_ID,
            location_room_id=NOWHERE_ROOM_ID,
            location_player_id=None,
            location_item_id=None,
            created=now,
            updated=now,
        )
    )
    session.commit()
    logger.info("Seeded sentinel player, room and item")


def check_connection(db: Session) -> bool:
    """True when a trivial query succeeds."""
    try:
        db.execute(select(1))
    except SQLAlchemyError:
        logger.exception("Database connectivity check failed")
        return False
    return True
