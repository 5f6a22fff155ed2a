"""Request validation that reports failures as 400 responses."""

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, TypeVar

from fastapi import HTTPException, Request
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


# Leading location parts FastAPI adds to request validation errors
_REQUEST_SOURCES = frozenset({"path", "query", "header", "cookie", "body"})


def flatten_errors(
    errors: Sequence[Mapping[str, Any]], *, strip_source: bool = False
) -> dict[str, Any]:
    """Group validation messages into form-level and per-field lists.

    Errors without a location (whole-body problems) go to `form_errors`;
    the rest are keyed by their dotted field path. With `strip_source`,
    the request part (`query`, `body`, ...) is dropped from the path.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}
    for error in errors:
        loc = tuple(error["loc"])
        if strip_source and loc and loc[0] in _REQUEST_SOURCES:
            loc = loc[1:]
        location = ".".join(str(part) for part in loc)
        if location:
            field_errors.setdefault(location, []).append(error["msg"])
        else:
            form_errors.append(error["msg"])
    return {"form_errors": form_errors, "field_errors": field_errors}


def flatten_validation_error(exc: ValidationError) -> dict[str, Any]:
    return flatten_errors(exc.errors())


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """Validate the JSON body against `model`, or raise a 400 with flattened errors."""
    try:
        payload = await request.json()
    except ValueError as exc:
        raise HTTPException(
            status_code=400,
            detail={"form_errors": ["Malformed JSON body"], "field_errors": {}},
        ) from exc
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=400, detail=flatten_validation_error(exc)
        ) from exc


def json_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that parses the request body into `model`."""

    async def dependency(request: Request) -> ModelT:
        return await parse_body(request, model)

    return dependency
