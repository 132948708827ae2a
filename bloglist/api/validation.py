"""Request body validation for Flask views.

@validate_request parses the JSON (or form) body into the pydantic model
named by a view parameter's annotation:

    @users_bp.post("")
    @validate_request
    def register(data: UserCreate):
        ...

Path parameters and other keyword arguments (such as ``identity`` from
@auth_required) pass through untouched.
"""

import typing
from functools import wraps

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def _first_error_message(exc: PydanticValidationError) -> str:
    """
    Message for the first validation error, in field declaration order.

    Custom validators raise ValueError with a complete sentence, used as is.
    Built-in pydantic messages are prefixed with the field name.
    """
    error = exc.errors()[0]
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])

    field = ".".join(str(part) for part in error["loc"]) or "request body"
    return f"{field}: {error['msg']}"


def _request_payload():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form.to_dict()
    return payload


def validate_request(f):
    """
    Decorator that validates the request body against annotated models.

    Raises:
        ValidationError: If the body does not match the model
    """
    hints = typing.get_type_hints(f)
    models = {
        name: hint for name, hint in hints.items()
        if name != "return" and isinstance(hint, type) and issubclass(hint, BaseModel)
    }

    @wraps(f)
    def wrapper(*args, **kwargs):
        for name, model in models.items():
            if name in kwargs:
                # Supplied by an outer decorator (e.g. identity)
                continue
            try:
                kwargs[name] = model.model_validate(_request_payload())
            except PydanticValidationError as e:
                raise ValidationError(
                    _first_error_message(e),
                    {"errors": e.errors(include_context=False, include_url=False)}
                ) from e
        return f(*args, **kwargs)

    return wrapper
