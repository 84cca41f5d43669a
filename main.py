import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv
from loguru import logger

from src.common.errors import StoreError
from src.common.log_config import configure_logging
from src.db.book.api.book_routes import router as book_router
from src.db.engagement.api.engagement_routes import router as engagement_router
from src.db.user.api.user_routes import router as user_router
from src.db.common.common_routes import router as common_router
from src.db.common.database_connection import init_database
from src.db.init_db import create_sample_data
from src.payments.stripe.payment_routes import router as payment_router

# Load environment variables
load_dotenv()

configure_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tạo tables và seed dữ liệu mẫu khi start (tắt bằng INIT_DB_ON_STARTUP=false)
    if os.getenv("INIT_DB_ON_STARTUP", "true").lower() in ("1", "true", "yes"):
        try:
            init_database()
            create_sample_data()
        except Exception:
            logger.exception("Database initialization failed")
            raise
    yield
    logger.info("Shutting down BookHub API")

# Tạo instance của FastAPI
app = FastAPI(
    title="BookHub Storefront API",
    description="Catalog, engagement và checkout API cho BookHub digital bookstore",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware để cho phép frontend truy cập
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def format_validation_errors(exc: RequestValidationError) -> str:
    """Gộp lỗi validate thành một message, mỗi lỗi chỉ rõ field"""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ()) if loc not in ("body", "query", "path"))
        parts.append(f'{error.get("msg")} at "{field}"' if field else error.get("msg"))
    return "Validation error: " + "; ".join(parts)

@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    if exc.status_code >= 500:
        logger.error("{} {} failed with {}: {}", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": format_validation_errors(exc)})

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

# Health check route
@app.get("/health")
async def health():
    """Health check endpoint"""
    return "healthy"

# Root route
@app.get("/")
async def root():
    """Root endpoint trả về thông tin API"""
    return {
        "message": "Welcome to the BookHub Storefront API",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "Books": "/api/books/",
            "Categories": "/api/categories",
            "Testimonials": "/api/testimonials",
            "Contact": "/api/contact",
            "Subscriptions": "/api/subscriptions",
            "Users": "/api/users",
            "Payments": "/api/create-payment-intent"
        }
    }

# Include routers từ các modules
app.include_router(book_router, prefix="/api", tags=["Catalog"])
app.include_router(engagement_router, prefix="/api", tags=["Engagement"])
app.include_router(user_router, prefix="/api", tags=["Users"])
app.include_router(payment_router, prefix="/api", tags=["Payments"])
app.include_router(common_router, prefix="/api", tags=["Health"])

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True
    )
