"""Domain layer DI providers."""

from dishka import Scope, provide

from brew.config import AuthSettings, WalletSettings
from brew.domain.repository import (
    CoffeeDateRepository,
    MatchRepository,
    SwipeRepository,
    TransactionManager,
    UserRepository,
    WalletTransactionRepository,
)
from brew.domain.service import (
    CoffeeDateService,
    JWTService,
    MatchService,
    SettlementService,
    SwipeService,
    UserService,
    WalletService,
)
from brew.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to share the request's repositories,
    and so its single database transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, match_repository: MatchRepository
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, match_repository=match_repository
        )

    @provide
    def get_swipe_service(self, swipe_repository: SwipeRepository) -> SwipeService:
        """Provide swipe domain service."""
        return SwipeService(swipe_repository=swipe_repository)

    @provide
    def get_match_service(
        self, match_repository: MatchRepository, swipe_repository: SwipeRepository
    ) -> MatchService:
        """Provide match domain service."""
        return MatchService(
            match_repository=match_repository, swipe_repository=swipe_repository
        )

    @provide
    def get_wallet_service(
        self,
        user_repository: UserRepository,
        wallet_transaction_repository: WalletTransactionRepository,
        user_service: UserService,
        transaction_manager: TransactionManager,
        wallet_settings: WalletSettings,
    ) -> WalletService:
        """Provide wallet domain service."""
        return WalletService(
            user_repository=user_repository,
            wallet_transaction_repository=wallet_transaction_repository,
            user_service=user_service,
            transaction_manager=transaction_manager,
            wallet_settings=wallet_settings,
        )

    @provide
    def get_coffee_date_service(
        self,
        coffee_date_repository: CoffeeDateRepository,
        match_service: MatchService,
        user_service: UserService,
    ) -> CoffeeDateService:
        """Provide coffee date domain service."""
        return CoffeeDateService(
            coffee_date_repository=coffee_date_repository,
            match_service=match_service,
            user_service=user_service,
        )

    @provide
    def get_settlement_service(
        self,
        coffee_date_repository: CoffeeDateRepository,
        coffee_date_service: CoffeeDateService,
        user_service: UserService,
        wallet_service: WalletService,
        transaction_manager: TransactionManager,
    ) -> SettlementService:
        """Provide settlement domain service."""
        return SettlementService(
            coffee_date_repository=coffee_date_repository,
            coffee_date_service=coffee_date_service,
            user_service=user_service,
            wallet_service=wallet_service,
            transaction_manager=transaction_manager,
        )
