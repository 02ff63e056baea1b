"""HTTP basic auth guarding the routes that change the room."""

import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

basic_security = HTTPBasic()

# Set by app.py from ServerConfig
_credentials = ("admin", "admin123")


def init(username, password):
    global _credentials
    _credentials = (username, password)


def _matches(given, expected):
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def verify_basic_auth(credentials: HTTPBasicCredentials = Depends(basic_security)):
    username, password = _credentials
    user_ok = _matches(credentials.username, username)
    password_ok = _matches(credentials.password, password)
    if not (user_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
