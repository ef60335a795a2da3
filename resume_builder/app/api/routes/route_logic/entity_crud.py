"""Generic create/read/update/delete logic for rows that belong to a resume.

Each entry type is described once by an `EntitySchema`; `EntityService`
applies the shared rules to it:

- the owning resume must belong to the caller, otherwise 404;
- a date pair must be ordered, URLs must be absolute;
- a duplicate key is rejected among the resume's other rows;
- the order index defaults to the number of siblings plus one;
- updates touch only the supplied fields.

"""

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.business_rules import (
    bad_request,
    not_found,
    parse_uuid,
    validate_date_range,
    validate_url,
)
from resume_builder.app.api.routes.route_logic.resume_crud import (
    get_resume_by_id_and_user,
)
from resume_builder.app.api.routes.route_logic.scoped_repository import (
    ScopedRepository,
)
from resume_builder.app.schemas.common import ApiModel, OrderUpdate

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntitySchema:
    """Declarative description of one resume entry type.

    Attributes:
        entity (str): Lower-case name used in messages, e.g. "skill".
        label (str): Capitalised name used in 404 details, e.g. "Skill".
        model: The mapped class.
        response_model (type[ApiModel]): DTO built from a row.
        unique_fields (tuple[str, ...]): Fields forming the per-resume duplicate key.
        duplicate_message (str): 400 detail for a duplicate key.
        date_range (tuple[str, str] | None): (start, end) field names that must be ordered.
        date_range_message (str): 400 detail for a reversed date pair.
        url_fields (tuple[str, ...]): Fields that must hold an absolute URL when set.
        url_message (str): 400 detail for a malformed URL.
        prepare (Callable | None): Hook called as `prepare(values, stored)` to check
            and normalise entity-specific fields in place; `stored` is the current row
            on update and None on create.

    """

    entity: str
    label: str
    model: Any
    response_model: type[ApiModel]
    unique_fields: tuple[str, ...] = ()
    duplicate_message: str = ""
    date_range: tuple[str, str] | None = None
    date_range_message: str = ""
    url_fields: tuple[str, ...] = ()
    url_message: str = ""
    prepare: Callable[[dict[str, Any], Any], None] | None = None


class EntityService:
    """Route logic shared by every resume entry type."""

    def __init__(self, schema: EntitySchema):
        self.schema = schema
        self.repository = ScopedRepository(schema.model, schema.entity, schema.label)

    def _to_response(self, row) -> ApiModel:
        return self.schema.response_model.model_validate(row)

    def _not_found(self):
        return not_found(self.schema.label)

    def _validate(self, values: dict[str, Any], stored=None) -> None:
        """Check dates and URLs in `values`, reading a missing date from `stored`."""
        if self.schema.date_range is not None:
            start_field, end_field = self.schema.date_range
            if start_field in values or end_field in values:
                start = values.get(start_field, getattr(stored, start_field, None))
                end = values.get(end_field, getattr(stored, end_field, None))
                validate_date_range(start, end, self.schema.date_range_message)

        for field in self.schema.url_fields:
            if field in values:
                validate_url(values[field], self.schema.url_message)

    def _check_duplicate(
        self,
        key: tuple[Any, ...],
        siblings: list,
        exclude_id: uuid.UUID | None = None,
    ) -> None:
        if all(part is None for part in key):
            return
        for sibling in siblings:
            if sibling.id == exclude_id:
                continue
            if tuple(getattr(sibling, field) for field in self.schema.unique_fields) == key:
                raise bad_request(self.schema.duplicate_message)

    def create(self, db: Session, user_id: str, payload: ApiModel) -> ApiModel:
        """Create an entry under one of the user's resumes.

        Args:
            db (Session): The database session.
            user_id (str): The requesting user.
            payload (ApiModel): The validated create request; carries `resume_id`.

        Returns:
            ApiModel: The created entry.

        Raises:
            HTTPException: 404 if the resume is not the user's; 400 on a failed business rule.
            PersistenceError: If a query or the insert fails.

        Notes:
            1. Verify the resume belongs to the user.
            2. Drop omitted fields so column defaults apply, then run the entity hook.
            3. Check the date pair and URLs.
            4. Load the siblings once for the duplicate check and the default order index.
            5. Insert and return the refreshed row.

        """
        values = {key: value for key, value in payload.model_dump().items() if value is not None}
        resume_id = values["resume_id"]
        get_resume_by_id_and_user(db, resume_id, user_id)

        if self.schema.prepare is not None:
            self.schema.prepare(values, None)
        self._validate(values)

        siblings = self.repository.list_by_resume_id(db, user_id, resume_id)
        if self.schema.unique_fields:
            key = tuple(values.get(field) for field in self.schema.unique_fields)
            self._check_duplicate(key, siblings)

        if values.get("order_index") is None:
            values["order_index"] = len(siblings) + 1

        row = self.repository.create(db, values)
        _msg = f"Created {self.schema.entity} {row.id} on resume {resume_id}"
        log.debug(_msg)
        return self._to_response(row)

    def get_by_id(self, db: Session, user_id: str, item_id: uuid.UUID) -> ApiModel:
        row = self.repository.get_by_id(db, user_id, item_id)
        if row is None:
            raise self._not_found()
        return self._to_response(row)

    def get_by_resume_id(self, db: Session, user_id: str, resume_id: uuid.UUID) -> list[ApiModel]:
        """List a resume's entries by `order_index`; 404 if the resume is not the user's."""
        get_resume_by_id_and_user(db, resume_id, user_id)
        return [
            self._to_response(row)
            for row in self.repository.list_by_resume_id(db, user_id, resume_id)
        ]

    def update(
        self,
        db: Session,
        user_id: str,
        item_id: uuid.UUID,
        payload: ApiModel,
    ) -> ApiModel:
        """Apply a partial update to an entry.

        Args:
            db (Session): The database session.
            user_id (str): The requesting user.
            item_id (uuid.UUID): The entry identifier.
            payload (ApiModel): The validated update request.

        Returns:
            ApiModel: The refreshed entry.

        Raises:
            HTTPException: 400 "no fields to update" when nothing was supplied, 404 if the
                entry is not the user's, 400 on a failed business rule.
            PersistenceError: If a query or the update fails.

        Notes:
            1. Fields sent as null are treated as not supplied.
            2. The empty-update check runs before any database access.
            3. Date pairs are checked against the stored value of the missing side.
            4. The duplicate key is only checked when one of its fields changes, ignoring this entry.

        """
        values = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not values:
            raise bad_request("no fields to update")

        row = self.repository.get_by_id(db, user_id, item_id)
        if row is None:
            raise self._not_found()

        if self.schema.prepare is not None:
            self.schema.prepare(values, row)
        self._validate(values, stored=row)

        fields = self.schema.unique_fields
        if any(field in values and values[field] != getattr(row, field) for field in fields):
            key = tuple(values.get(field, getattr(row, field)) for field in fields)
            siblings = self.repository.list_by_resume_id(db, user_id, row.resume_id)
            self._check_duplicate(key, siblings, exclude_id=row.id)

        updated = self.repository.update(db, user_id, item_id, values)
        if updated is None:
            raise self._not_found()
        return self._to_response(updated)

    def bulk_update_order(self, db: Session, user_id: str, items: list[OrderUpdate]) -> None:
        """Reorder several entries at once.

        Args:
            db (Session): The database session.
            user_id (str): The requesting user.
            items (list[OrderUpdate]): The new positions.

        Raises:
            HTTPException: 400 "invalid <entity> ID" for a malformed id, 404 if any entry
                is not the user's.
            PersistenceError: If an update fails; no position is changed.

        Notes:
            1. Parse every id before touching the database.
            2. Check ownership of every entry.
            3. Apply all positions in one transaction.

        """
        moves = [(parse_uuid(item.id, self.schema.entity), item.order_index) for item in items]
        for item_id, _ in moves:
            if self.repository.get_by_id(db, user_id, item_id) is None:
                raise self._not_found()
        self.repository.bulk_update_order(db, user_id, moves)

    def delete(self, db: Session, user_id: str, item_id: uuid.UUID) -> None:
        """Delete an entry; 404 if it is not the user's or disappears before the delete runs."""
        if self.repository.get_by_id(db, user_id, item_id) is None:
            raise self._not_found()
        if self.repository.delete(db, user_id, item_id) == 0:
            raise self._not_found()
        _msg = f"Deleted {self.schema.entity} {item_id}"
        log.debug(_msg)
