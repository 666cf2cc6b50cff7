"""Teachers API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response
from fastapi import status as http_status

from teacher_api.exceptions import PayloadValidationError
from teacher_api.models.base import MAX_ID
from teacher_api.schemas.teacher import TeacherView
from teacher_api.schemas.validation import validate_teacher
from teacher_api.services.teacher_service import TeacherService
from teacher_api.utils.dependencies import dependencies

router = APIRouter(
    prefix="/teachers",
    tags=["Teachers"],
)

_SERVER_ERROR = {http_status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Server error"}}
_BAD_REQUEST = {http_status.HTTP_400_BAD_REQUEST: {"description": "Invalid request"}}
_NOT_FOUND = {http_status.HTTP_404_NOT_FOUND: {"description": "Teacher not found"}}

# Ids the store column can represent, anything wider is a client error
TeacherId = Annotated[int, Path(ge=-MAX_ID - 1, le=MAX_ID)]


def validated_view(view: TeacherView) -> TeacherView:
    """Reject payloads that break the Teacher field rules."""
    violations = validate_teacher(view)
    if violations:
        raise PayloadValidationError(violations)
    return view


@router.get("", responses=_SERVER_ERROR)
async def list_teachers(
    service: TeacherService = Depends(dependencies.teacher),
) -> list[TeacherView]:
    """Get all teachers.

    Sample request:

        GET /teachers
    """
    return await service.list_teachers()


@router.get(
    "/{teacher_id}",
    name="get_teacher",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def get_teacher(
    teacher_id: TeacherId,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherView:
    """Get teacher by id.

    Sample request:

        GET /teachers/5
    """
    return await service.get_teacher(teacher_id)


@router.put(
    "/{teacher_id}",
    status_code=http_status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
)
async def update_teacher(
    teacher_id: TeacherId,
    view: TeacherView = Depends(validated_view),
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Update teacher properties.

    The id in the body must equal the id in the path.

    Sample request:

        PUT /teachers/5
    """
    await service.update_teacher(teacher_id, view)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)


@router.post(
    "",
    status_code=http_status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
)
async def create_teacher(
    request: Request,
    response: Response,
    view: TeacherView = Depends(validated_view),
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherView:
    """Create new teacher.

    Returns the created teacher with a Location header pointing at it.

    Sample request:

        POST /teachers
    """
    created = await service.create_teacher(view)
    response.headers["Location"] = str(
        request.url_for("get_teacher", teacher_id=created.id)
    )
    return created


@router.delete(
    "/{teacher_id}",
    status_code=http_status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
)
async def delete_teacher(
    teacher_id: TeacherId,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Delete teacher by id.

    Sample request:

        DELETE /teachers/5
    """
    await service.delete_teacher(teacher_id)
    return Response(status_code=http_status.HTTP_204_NO_CONTENT)
