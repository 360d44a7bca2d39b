# FixIt repair ticket tracking - application entry point
#
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from datetime import datetime
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from fixit.core.config import settings
from fixit.api.v1.routers import api_router
from fixit.core.logging_config import setup_logging, get_logger
from fixit.middleware.logging_middleware import LoggingMiddleware

# Initialize logging
setup_logging()
logger = get_logger(__name__)
from fixit.db.session import engine, Base, SessionLocal
from fixit.models import models  # register all models
from fixit.schemas.common import ResponseCode
from fixit.services.notification_service import NotificationCenter
from fixit.services.repair_request_service import RepairRequestService
from fixit.services.request_feed import request_feed
from fixit.services.user_service import UserService


def create_database_if_not_exists():
    """Create the MySQL database when it does not exist yet"""
    import pymysql

    try:
        connection = pymysql.connect(
            host=settings.MYSQL_HOST,
            port=settings.MYSQL_PORT,
            user=settings.MYSQL_USER,
            password=settings.MYSQL_PASSWORD,
            charset='utf8mb4'
        )
        try:
            with connection.cursor() as cursor:
                cursor.execute("SHOW DATABASES LIKE %s", (settings.MYSQL_DB,))
                if cursor.fetchone():
                    logger.info("Database '%s' already exists", settings.MYSQL_DB)
                else:
                    cursor.execute(
                        f"CREATE DATABASE `{settings.MYSQL_DB}` "
                        f"CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
                    )
                    logger.info("Database '%s' created", settings.MYSQL_DB)
        finally:
            connection.close()
    except Exception as e:
        logger.warning("Failed to check/create database: %s. Assuming it exists.", e)


def create_tables():
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")
    except Exception as e:
        logger.error("Failed to create database tables: %s", e)


def seed_users():
    db = SessionLocal()
    try:
        UserService.init_auth(db)
    except Exception as e:
        db.rollback()
        logger.error("Failed to seed initial users: %s", e)
    finally:
        db.close()


def start_notification_center(app: FastAPI):
    """Prime the center with the current tickets and subscribe it to the feed"""
    center = NotificationCenter(
        limit=settings.NOTIFICATION_LIMIT,
        cache_file=settings.NOTIFICATION_CACHE_FILE,
    )
    db = SessionLocal()
    try:
        center.prime(RepairRequestService.get_requests(db))
    except Exception as e:
        logger.error("Failed to load tickets for notifications: %s", e)
    finally:
        db.close()

    app.state.notification_center = center
    return request_feed.subscribe(center.handle_snapshot)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")

    if settings.USES_MYSQL:
        create_database_if_not_exists()
    create_tables()
    seed_users()
    unsubscribe = start_notification_center(app)

    yield

    logger.info("Application is shutting down...")
    unsubscribe()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="FixIt - equipment repair ticket tracking",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,  # keeps Thai text as UTF-8
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Validation errors in the standard envelope"""
    error_messages = []
    for error in exc.errors():
        loc = ".".join(str(x) for x in error.get("loc", []))
        error_messages.append(f"{loc}: {error.get('msg', '')}")

    return ORJSONResponse(
        status_code=200,
        content={
            "code": ResponseCode.PARAM_ERROR,
            "message": f"Validation failed: {'; '.join(error_messages)}",
            "data": None,
            "timestamp": datetime.now().isoformat(),
        }
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """HTTP errors in the standard envelope"""
    code_mapping = {
        400: ResponseCode.PARAM_ERROR,
        401: ResponseCode.UNAUTHORIZED,
        403: ResponseCode.PERMISSION_DENIED,
        404: ResponseCode.NOT_FOUND,
        500: ResponseCode.INTERNAL_ERROR,
    }
    code = code_mapping.get(exc.status_code, ResponseCode.INTERNAL_ERROR)

    return ORJSONResponse(
        status_code=200,
        content={
            "code": code,
            "message": str(exc.detail),
            "data": None,
            "timestamp": datetime.now().isoformat(),
        },
        headers=getattr(exc, "headers", None),
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_CREDENTIALS,
    allow_methods=settings.CORS_METHODS,
    allow_headers=settings.CORS_HEADERS,
)

app.add_middleware(LoggingMiddleware)

app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/")
async def welcome():
    return {
        "message": "Welcome to FixIt",
        "description": "ระบบแจ้งซ่อมครุภัณฑ์",
        "docs": "/docs",
        "version": settings.VERSION,
        "features": [
            "Repair ticket submission and tracking",
            "Staff handling and vendor follow-up",
            "Change notifications",
            "CSV export and printable forms",
            "Inventory and preventive maintenance",
        ]
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "FixIt",
        "version": settings.VERSION
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fixit.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
