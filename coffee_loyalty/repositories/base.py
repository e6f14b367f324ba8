import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coffee_loyalty.errors import StorageError
from coffee_loyalty.utils import parse_uuid


logger = logging.getLogger(__name__)


class Repository:
    """
    Typed accessor over one table.

    Holds the request-scoped session it was built with. Lookups return the row or None;
    they never raise for a missing row or a malformed identifier.
    """

    model = None
    label = "record"

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id, *, for_update: bool = False):
        uid = parse_uuid(entity_id)
        if uid is None:
            return None

        q = self.db.query(self.model).filter(self.model.id == uid)
        if for_update:
            q = q.with_for_update(of=self.model)
        return q.first()

    def list_all(self):
        return self.db.query(self.model).order_by(self.model.created_at.asc()).all()

    def save(self, entity):
        """Insert or update a single row and commit it on its own."""
        try:
            self.db.add(entity)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("failed to save %s", self.label, extra={"error": str(e)})
            raise StorageError(f"Failed to save {self.label}.") from e

        self.db.refresh(entity)
        return entity
