import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from resume_builder.app.api.routes.route_logic.business_rules import parse_uuid
from resume_builder.app.api.routes.route_logic.entity_crud import EntityService
from resume_builder.app.core.auth import get_current_user_id
from resume_builder.app.database.database import get_db
from resume_builder.app.schemas.common import ApiModel

log = logging.getLogger(__name__)


def build_entity_router(
    service: EntityService,
    segment: str,
    create_model: type[ApiModel],
    update_model: type[ApiModel],
    bulk_model: type[ApiModel],
    bulk_field: str,
    tag: str,
) -> APIRouter:
    """Build the CRUD router for one resume entry type.

    Args:
        service (EntityService): Route logic for the entry type.
        segment (str): Plural path segment, e.g. "skills".
        create_model (type[ApiModel]): Body model for create requests.
        update_model (type[ApiModel]): Body model for partial updates.
        bulk_model (type[ApiModel]): Body model for reorder requests.
        bulk_field (str): Attribute of `bulk_model` holding the list of moves.
        tag (str): OpenAPI tag.

    Returns:
        APIRouter: A router exposing:
            POST /<segment>, PUT /<segment>/order, GET/PUT/DELETE /<segment>/{id}
            and GET /resumes/{resume_id}/<segment>.

    Notes:
        1. PUT /<segment>/order is registered before PUT /<segment>/{id} so "order" is not taken for an id.
        2. Path ids are parsed here, so a malformed one is a 400 naming the entity.

    """
    router = APIRouter(tags=[tag])
    entity = service.schema.entity
    response_model = service.schema.response_model

    @router.post(
        f"/{segment}",
        response_model=response_model,
        status_code=status.HTTP_201_CREATED,
    )
    def create_item(
        request: create_model,
        db: Session = Depends(get_db),
        user_id: str = Depends(get_current_user_id),
    ):
        return service.create(db, user_id, request)

    @router.put(f"/{segment}/order", status_code=status.HTTP_204_NO_CONTENT)
    def update_item_order(
        request: bulk_model,
        db: Session = Depends(get_db),
        user_id: str = Depends(get_current_user_id),
    ):
        service.bulk_update_order(db, user_id, getattr(request, bulk_field))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get(f"/{segment}/{{item_id}}", response_model=response_model)
    def get_item(
        item_id: str,
        db: Session = Depends(get_db),
        user_id: str = Depends(get_current_user_id),
    ):
        return service.get_by_id(db, user_id, parse_uuid(item_id, entity))

    @router.put(f"/{segment}/{{item_id}}", response_model=response_model)
    def update_item(
        item_id: str,
        request: update_model,
        db: Session = Depends(get_db),
        user_id: str = Depends(get_current_user_id),
    ):
        return service.update(db, user_id, parse_uuid(item_id, entity), request)

    @router.delete(f"/{segment}/{{item_id}}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(
        item_id: str,
        db: Session = Depends(get_db),
        user_id: str = Depends(get_current_user_id),
    ):
        service.delete(db, user_id, parse_uuid(item_id, entity))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.get(f"/resumes/{{resume_id}}/{segment}", response_model=list[response_model])
    def list_items_for_resume(
        resume_id: str,
        db: Session = Depends(get_db),
        user_id: str = Depends(get_current_user_id),
    ):
        return service.get_by_resume_id(db, user_id, parse_uuid(resume_id, "resume"))

    _msg = f"Built router for /{segment}"
    log.debug(_msg)
    return router
