from typing import Optional

from fastapi import Cookie, Depends, Header, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

# Bearer token extractor (auto_error=False allows falling back to the cookie)
security = HTTPBearer(auto_error=False)

AUTH_COOKIE = "VtexIdclientAutCookie"


def get_auth_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    cookie_token: Optional[str] = Cookie(default=None, alias=AUTH_COOKIE),
    header_token: Optional[str] = Header(default=None, alias=AUTH_COOKIE),
) -> str:
    """Return the caller's session token for pass-through to platform APIs.

    The token is opaque here; it is never verified, only forwarded.
    """
    token = cookie_token or header_token or (credentials.credentials if credentials else None)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization required",
        )
    return token
