# coding: utf8
import hmac
import math
from functools import wraps

from flask import current_app, request
from jsonschema import FormatChecker, validate
from jsonschema.exceptions import ValidationError

from storefront.errors.exceptions import Unauthorized
from storefront.lib.response import Response


def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        expected = current_app.config.get("ADMIN_API_TOKEN") or ""
        supplied = request.headers.get("X-Admin-Token") or ""
        if not expected or not hmac.compare_digest(expected, supplied):
            raise Unauthorized(message="Unauthorized")
        return fn(*args, **kwargs)

    return wrapper


def _non_finite_path(value, path=()):
    """Path of the first NaN or infinite number in ``value``, or ``None``."""
    if isinstance(value, float) and not math.isfinite(value):
        return path
    if isinstance(value, dict):
        children = value.items()
    elif isinstance(value, list):
        children = enumerate(value)
    else:
        return None
    for key, child in children:
        found = _non_finite_path(child, path + (key,))
        if found is not None:
            return found
    return None


def parameters(**schema):
    """Collect query, JSON or form arguments, validate them against ``schema``
    and pass them to the resource method as its last positional argument.

    Missing or empty ``required`` fields and schema violations both answer 400
    before the resource runs.
    """

    def decorated(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            req_args = request.args.to_dict()
            if request.method in ("POST", "PUT", "PATCH", "DELETE"):
                if request.is_json:
                    body = request.get_json(silent=True)
                    if not isinstance(body, dict):
                        return Response(
                            ok=False, error="Invalid JSON body", status=400
                        ).to_dict()
                    req_args.update(body)
                elif request.mimetype == "multipart/form-data":
                    req_args.update(request.form.to_dict())

            req_args = {
                k: v for k, v in req_args.items() if k in schema["properties"].keys()
            }

            missing = [
                field
                for field in schema.get("required", [])
                if field not in req_args or req_args[field] in (None, "", [], {})
            ]
            if missing:
                return Response(
                    ok=False,
                    error="Missing required fields",
                    missing=missing,
                    status=400,
                ).to_dict()

            bad_number = _non_finite_path(req_args)
            if bad_number is not None:
                field = ".".join(str(part) for part in bad_number)
                return Response(
                    ok=False, error=f"Field '{field}' is not valid.", status=400
                ).to_dict()

            try:
                validate(
                    instance=req_args, schema=schema, format_checker=FormatChecker()
                )
            except ValidationError as exp:
                field = ".".join(str(part) for part in exp.absolute_path)
                message = (
                    f"Field '{field}' is not valid."
                    if field
                    else "Request parameters are invalid."
                )
                return Response(ok=False, error=message, status=400).to_dict()

            new_args = args + (req_args,)
            return func(*new_args, **kwargs)

        return wrapper

    return decorated
