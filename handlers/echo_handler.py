"""
handlers/echo_handler.py
-------------------------
Liveness endpoint. Touches no database.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def handle_echo() -> str:
    return "Server working"
