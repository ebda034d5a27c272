"""Access and refresh token issuance.

Login, registration and refresh all end the same way: a fresh refresh token
is persisted (hash only) and a signed access token is generated for the user.
"""

from datetime import datetime

from src.application.dtos.auth_dtos import AuthResult, UserInfo
from src.domain.entities.user import User
from src.domain.protocols.refresh_token_service_protocol import RefreshTokenServiceProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.unit_of_work import UnitOfWork


class AuthTokenIssuer:
    """Issues the token pair returned by every successful authentication.

    Usage:
        auth = await issuer.issue(uow, user, issued_at=now)
        await uow.commit()
    """

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        refresh_token_service: RefreshTokenServiceProtocol,
    ) -> None:
        self._tokens = token_service
        self._refresh_tokens = refresh_token_service

    async def issue(self, uow: UnitOfWork, user: User, issued_at: datetime) -> AuthResult:
        """Persist a new refresh token for ``user`` and sign an access token.

        The caller owns the transaction and must commit it.
        """
        client_token, refresh_token = self._refresh_tokens.issue(
            user_id=user.id, issued_at=issued_at
        )
        await uow.refresh_tokens.add(refresh_token)

        access_token = self._tokens.generate_access_token(
            user_id=user.id,
            email=user.email,
            username=user.username,
            roles=list(user.roles),
        )
        return AuthResult(
            access_token=access_token,
            refresh_token=client_token,
            expires_at=self._tokens.access_token_expiration(issued_at),
            user=UserInfo.from_entity(user),
        )
