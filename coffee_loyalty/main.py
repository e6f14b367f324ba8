import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from coffee_loyalty import config
from coffee_loyalty.db import engine, Base
from coffee_loyalty.errors import LoyaltyError

from coffee_loyalty.models.club_category import ClubCategory
from coffee_loyalty.models.member import Member
from coffee_loyalty.models.product import Product
from coffee_loyalty.models.transaction import Transaction

from coffee_loyalty.routes.health import router as health_router
from coffee_loyalty.routes.members import redeem_member_points, router as members_router
from coffee_loyalty.routes.products import router as products_router
from coffee_loyalty.routes.transactions import router as transactions_router
from coffee_loyalty.routes.club_categories import router as club_categories_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Coffee Loyalty")

# ─── CORS ─────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup():
    Base.metadata.create_all(bind=engine)
    logger.info("store connected", extra={"url": engine.url.render_as_string(hide_password=True)})


@app.on_event("shutdown")
def shutdown():
    engine.dispose()
    logger.info("store disconnected")


# ─── Errors ───────────────────────────────────────────────────────
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc, LoyaltyError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # unknown path, or a known path with a method it does not serve
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "Endpoint not found."})

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.debug("rejected request payload", extra={"path": request.url.path, "errors": str(exc.errors())})
    if request.scope.get("endpoint") is redeem_member_points:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Points must be a positive number."},
        )
    return JSONResponse(status_code=400, content={"error": "Invalid request payload."})


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("storage error", exc_info=exc, extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"error": "Storage error."})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled error", exc_info=exc, extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"error": "Internal server error."})


app.include_router(health_router)
app.include_router(members_router)
app.include_router(products_router)
app.include_router(transactions_router)
app.include_router(club_categories_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
