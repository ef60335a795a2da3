import logging
import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.business_rules import not_found
from resume_builder.app.core.exceptions import persistence_errors
from resume_builder.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)


class ScopedRepository:
    """Data access for rows owned through a resume.

    Every statement restricts rows to resumes whose `user_id` matches the
    caller: reads join `resumes`, writes filter `resume_id` through a subquery
    on the caller's resumes. A row owned by someone else is indistinguishable
    from a missing one.

    Args:
        model: The mapped class; must carry `id`, `resume_id` and `order_index`.
        entity (str): Lower-case entity name used in log and error context, e.g. "skill".
        label (str): Capitalised name used in 404 details, e.g. "Skill".

    """

    def __init__(self, model: Any, entity: str, label: str):
        self.model = model
        self.entity = entity
        self.label = label

    def _ids(self, item_id: uuid.UUID, user_id: str) -> dict[str, object]:
        return {f"{self.entity}_id": item_id, "user_id": user_id}

    def _owned_resume_ids(self, user_id: str):
        return select(DatabaseResume.id).where(DatabaseResume.user_id == user_id)

    def _owned(self, db: Session, user_id: str):
        return db.query(self.model).join(
            DatabaseResume,
            self.model.resume_id == DatabaseResume.id,
        ).filter(DatabaseResume.user_id == user_id)

    def get_by_id(self, db: Session, user_id: str, item_id: uuid.UUID):
        """Fetch one row owned by the user.

        Args:
            db (Session): The database session.
            user_id (str): The requesting user.
            item_id (uuid.UUID): The row identifier.

        Returns:
            The row, or None when it does not exist or belongs to another user.

        Raises:
            PersistenceError: If the query fails.

        """
        with persistence_errors(db, f"get {self.entity} by id", **self._ids(item_id, user_id)):
            return self._owned(db, user_id).filter(self.model.id == item_id).first()

    def list_by_resume_id(self, db: Session, user_id: str, resume_id: uuid.UUID) -> list:
        """List a resume's rows by `order_index` ascending.

        Returns:
            list: The rows; empty when the resume has none.

        Raises:
            PersistenceError: If the query fails.

        """
        with persistence_errors(
            db,
            f"list {self.entity} rows by resume",
            resume_id=resume_id,
            user_id=user_id,
        ):
            return (
                self._owned(db, user_id)
                .filter(self.model.resume_id == resume_id)
                .order_by(self.model.order_index.asc())
                .all()
            )

    def create(self, db: Session, values: dict[str, Any]):
        """Insert a row and return it refreshed from the database.

        Args:
            db (Session): The database session.
            values (dict[str, Any]): Column values, including `resume_id`.
                Ownership of the resume must already have been checked.

        Raises:
            PersistenceError: If the insert fails; the session is rolled back.

        """
        with persistence_errors(db, f"create {self.entity}", resume_id=values.get("resume_id")):
            item = self.model(**values)
            db.add(item)
            db.commit()
            db.refresh(item)
        return item

    def update(self, db: Session, user_id: str, item_id: uuid.UUID, values: dict[str, Any]):
        """Apply a partial update to a row owned by the user.

        Args:
            db (Session): The database session.
            user_id (str): The requesting user.
            item_id (uuid.UUID): The row identifier.
            values (dict[str, Any]): Only the columns to change.

        Returns:
            The refreshed row, or None if no owned row matched.

        Raises:
            ValueError: If `values` is empty.
            PersistenceError: If the statement fails; the session is rolled back.

        """
        if not values:
            raise ValueError("no fields to update")

        with persistence_errors(db, f"update {self.entity}", **self._ids(item_id, user_id)):
            updated = (
                db.query(self.model)
                .filter(
                    self.model.id == item_id,
                    self.model.resume_id.in_(self._owned_resume_ids(user_id)),
                )
                .update(values, synchronize_session=False)
            )
            db.commit()

        if updated == 0:
            return None
        return self.get_by_id(db, user_id, item_id)

    def update_order(self, db: Session, user_id: str, item_id: uuid.UUID, order_index: int) -> int:
        """Set one row's `order_index` without committing; returns the affected row count."""
        return (
            db.query(self.model)
            .filter(
                self.model.id == item_id,
                self.model.resume_id.in_(self._owned_resume_ids(user_id)),
            )
            .update({"order_index": order_index}, synchronize_session=False)
        )

    def bulk_update_order(
        self,
        db: Session,
        user_id: str,
        items: list[tuple[uuid.UUID, int]],
    ) -> None:
        """Move several rows in one transaction.

        Args:
            db (Session): The database session.
            user_id (str): The requesting user.
            items (list[tuple[uuid.UUID, int]]): (row id, new order index) pairs.

        Raises:
            HTTPException: 404 if a row stopped matching between the ownership check and its update.
            PersistenceError: If any statement fails.

        Notes:
            1. Issue one UPDATE per item inside the session's transaction.
            2. The first failure rolls the transaction back; no partial order is kept.
            3. Commit once after every item succeeded.

        """
        with persistence_errors(db, f"update {self.entity} order", user_id=user_id):
            for item_id, order_index in items:
                if self.update_order(db, user_id, item_id, order_index) == 0:
                    db.rollback()
                    _msg = f"{self.entity} {item_id} vanished during reorder; rolled back"
                    log.warning(_msg)
                    raise not_found(self.label)
            db.commit()

        _msg = f"Reordered {len(items)} {self.entity} rows for user {user_id}"
        log.debug(_msg)

    def delete(self, db: Session, user_id: str, item_id: uuid.UUID) -> int:
        """Delete a row owned by the user; returns the affected row count.

        Raises:
            PersistenceError: If the statement fails.

        """
        with persistence_errors(db, f"delete {self.entity}", **self._ids(item_id, user_id)):
            deleted = (
                db.query(self.model)
                .filter(
                    self.model.id == item_id,
                    self.model.resume_id.in_(self._owned_resume_ids(user_id)),
                )
                .delete(synchronize_session=False)
            )
            db.commit()
        return deleted
