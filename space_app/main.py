from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from space_app.config import settings
from space_app.database import Base, engine
from space_app.exceptions import InvalidInput, NotFound
from space_app.routers import ship_router

# START COMMAND:
# uvicorn space_app.main:app --reload


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str, detail=None) -> JSONResponse:
    return JSONResponse(status_code=status_code,
                        content={"status": "error", "message": message, "detail": detail})


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return _error(status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    detail = [{"loc": list(err.get("loc", ())), "msg": err.get("msg")} for err in exc.errors()]
    return _error(status.HTTP_400_BAD_REQUEST, "Malformed request", detail)


app.include_router(ship_router, prefix="/rest/ships", tags=["ships"])


@app.get("/")
async def read_root():
    return {"status": "ok", "message": "Space ships service"}
