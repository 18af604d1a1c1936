"""JWT authentication provider implementation.

Accepts Supabase-issued access tokens (ES256, verified against the
project's JWKS) and locally signed HS256 tokens (tests and scripts). The
``sub`` claim is the id of the profile the caller owns.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

import httpx
from jose import JWTError, jwt
from jose.backends import ECKey

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWKSCache:
    """Lazily fetched ``kid -> JWK`` mapping, refreshed on unknown key ids."""

    def __init__(self, jwks_url: str) -> None:
        self._jwks_url = jwks_url
        self._keys: dict[str, Any] | None = None

    async def get(self, kid: str) -> dict[str, Any] | None:
        keys = await self._load()
        if kid not in keys:
            # Signing key may have rotated since the last fetch
            self._keys = None
            keys = await self._load()
        return keys.get(kid)

    async def _load(self) -> dict[str, Any]:
        if self._keys is not None:
            return self._keys
        if not self._jwks_url:
            return {}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self._jwks_url, timeout=10.0)
                response.raise_for_status()
        except httpx.HTTPError:
            logger.exception("Failed to fetch JWKS from %s", self._jwks_url)
            return {}

        self._keys = {
            key["kid"]: key for key in response.json().get("keys", []) if key.get("kid")
        }
        logger.info("Fetched %d JWKS keys", len(self._keys))
        return self._keys


_jwks_cache = JWKSCache(settings.supabase_jwks_url)


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        jwks: JWKSCache = _jwks_cache,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._jwks = jwks

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the caller.

        Returns:
            TokenUser if valid, None if invalid, expired or missing claims
        """
        try:
            header = jwt.get_unverified_header(token)
            if header.get("alg") == "ES256":
                claims = await self._decode_es256(token, header)
            else:
                claims = jwt.decode(
                    token,
                    self._secret_key,
                    algorithms=[self._algorithm],
                    options={"verify_aud": False},
                )
        except JWTError:
            return None

        return self._to_user(claims) if claims else None

    async def _decode_es256(self, token: str, header: dict) -> Optional[dict]:
        """Verify an ES256 token against the JWKS public key named by ``kid``."""
        kid = header.get("kid")
        if not kid:
            return None

        key_data = await self._jwks.get(kid)
        if not key_data:
            logger.warning("JWKS key not found for kid=%s", kid)
            return None

        return jwt.decode(
            token,
            ECKey(key_data, algorithm="ES256"),
            algorithms=["ES256"],
            options={"verify_aud": False},
        )

    @staticmethod
    def _to_user(claims: dict) -> Optional[TokenUser]:
        subject = claims.get("sub")
        email = claims.get("email")
        if not subject or not email:
            return None
        try:
            user_id = UUID(subject)
        except ValueError:
            return None
        return TokenUser(id=user_id, email=email, role=claims.get("role"))

    def create_token(self, user: TokenUser) -> str:
        """Create an HS256 token for a user (tests and local scripts)."""
        payload: dict = {
            "sub": str(user.id),
            "email": user.email,
            "aud": "authenticated",
            "role": user.role or "authenticated",
            "exp": datetime.utcnow() + timedelta(minutes=self._expire_minutes),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
