from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session
from datetime import datetime

from src.db.common.database_connection import get_db

router = APIRouter()

# Health check
@router.get("/health/")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint, kiểm tra kết nối database"""
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Database connection failed: {str(e)}")
    return {
        "status": "healthy",
        "database": "connected",
        "timestamp": datetime.utcnow()
    }
