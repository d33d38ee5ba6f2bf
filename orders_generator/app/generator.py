import logging
import random
import threading

from sqlalchemy.exc import SQLAlchemyError

from . import models
from .database import get_engine, open_connection, session_factory
from .errors import TableCreateError, TableDropError

logger = logging.getLogger(__name__)


class OrderGenerator:
    """
    Keeps one table of random orders alive for the lifetime of a run.

    The table is created at startup, receives one order every insert_interval
    seconds until stop_event is set, and is dropped at shutdown.
    """

    def __init__(self, settings, stop_event=None, rng=None):
        self.settings = settings
        self.stop_event = stop_event or threading.Event()
        self.rng = rng or random.Random()
        self.engine = None
        self.connection = None
        self.Session = None

    def open(self):
        """Connects to the database. Raises a FatalError if it is unreachable."""
        self.engine = get_engine(self.settings.database_url)
        self.connection = open_connection(self.engine, self.settings.schema_name)
        self.Session = session_factory(self.connection)
        logger.info("connected to database")

    def create_table(self):
        try:
            models.Order.__table__.create(bind=self.connection)
            self.connection.commit()
        except SQLAlchemyError as e:
            raise TableCreateError(f"failed to create table: {e}") from e
        logger.info("table created")

    def insert_order(self):
        """
        Inserts one random order. A failed insert is logged and the row is lost.

        Returns the persisted Order, or None if the insert failed.
        """
        order = models.Order(**models.random_order(self.rng).model_dump())
        session = self.Session()
        try:
            session.add(order)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.warning("failed to insert order: %s", e)
            return None
        finally:
            session.close()

        logger.info("order %s inserted", order.order_id)
        return order

    def generate(self):
        """Inserts orders until stop_event is set."""
        while not self.stop_event.is_set():
            self.insert_order()
            # Returns early when a stop signal arrives.
            self.stop_event.wait(self.settings.insert_interval)
        logger.info("application stopped")

    def drop_table(self):
        try:
            models.Order.__table__.drop(bind=self.connection)
            self.connection.commit()
        except SQLAlchemyError as e:
            raise TableDropError(f"failed to drop table: {e}") from e
        logger.info("table dropped")

    def close(self):
        self.connection.close()
        self.engine.dispose()
        logger.info("connection closed")

    def run(self):
        """
        Runs the generator from connection to teardown.

        A FatalError from any step propagates and no later step runs; in
        particular the connection is left open when the drop fails.
        """
        self.open()
        self.create_table()
        self.generate()
        self.drop_table()
        self.close()
