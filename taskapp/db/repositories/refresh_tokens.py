from datetime import datetime, timezone
from typing import Optional
from sqlmodel import select

from taskapp.db.repositories.base import BaseRepository
from taskapp.db.models.refresh_tokens import RefreshToken

class RefreshTokenRepository(BaseRepository[RefreshToken]):
    model = RefreshToken

    def get_by_jti(self, jti: str) -> Optional[RefreshToken]:
        return self.session.exec(
            select(self.model).where(self.model.jti == jti)
        ).first()

    def revoke(self, jti: str) -> bool:
        """Révoque un refresh ; False si inconnu ou déjà révoqué."""
        token = self.get_by_jti(jti)
        if not token or token.revoked_at:
            return False
        token.revoked_at = datetime.now(timezone.utc)
        self.session.add(token)
        self.session.commit()
        return True
