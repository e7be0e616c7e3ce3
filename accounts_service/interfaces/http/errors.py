from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...domain.errors import AccountError


def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload())


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = []
    for err in exc.errors():
        # drop the leading "body"/"query" location segment
        loc = [str(p) for p in err.get("loc", ())[1:]]
        fields.append(".".join(loc) or "body")
    return JSONResponse(status_code=400, content={"error": "invalid request", "fields": fields})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
