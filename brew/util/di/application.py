"""Application layer DI providers."""

from dishka import Scope, provide

from brew.application.usecase.date import (
    CancelDateUseCase,
    ConfirmDateUseCase,
    GetDateUseCase,
    ListDatesUseCase,
    PayForDateUseCase,
    ProposeDateUseCase,
    RespondToDateUseCase,
)
from brew.application.usecase.match import (
    BlockMatchUseCase,
    GetMatchUseCase,
    ListMatchesUseCase,
)
from brew.application.usecase.swipe import RecordSwipeUseCase
from brew.application.usecase.user import AssignRoleUseCase, GetUserUseCase
from brew.application.usecase.wallet import (
    GetWalletUseCase,
    ReconcileWalletUseCase,
    TopUpUseCase,
)
from brew.config import WalletSettings
from brew.domain.service import (
    CoffeeDateService,
    MatchService,
    SettlementService,
    SwipeService,
    UserService,
    WalletService,
)
from brew.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Swipe use cases
    @provide
    def get_record_swipe_use_case(
        self,
        swipe_service: SwipeService,
        match_service: MatchService,
        user_service: UserService,
    ) -> RecordSwipeUseCase:
        """Provide record swipe use case."""
        return RecordSwipeUseCase(
            swipe_service=swipe_service,
            match_service=match_service,
            user_service=user_service,
        )

    # Match use cases
    @provide
    def get_list_matches_use_case(
        self, match_service: MatchService
    ) -> ListMatchesUseCase:
        """Provide list matches use case."""
        return ListMatchesUseCase(match_service=match_service)

    @provide
    def get_get_match_use_case(self, match_service: MatchService) -> GetMatchUseCase:
        """Provide get match use case."""
        return GetMatchUseCase(match_service=match_service)

    @provide
    def get_block_match_use_case(
        self, match_service: MatchService
    ) -> BlockMatchUseCase:
        """Provide block match use case."""
        return BlockMatchUseCase(match_service=match_service)

    # Coffee date use cases
    @provide
    def get_propose_date_use_case(
        self, coffee_date_service: CoffeeDateService
    ) -> ProposeDateUseCase:
        """Provide propose date use case."""
        return ProposeDateUseCase(coffee_date_service=coffee_date_service)

    @provide
    def get_respond_to_date_use_case(
        self, coffee_date_service: CoffeeDateService
    ) -> RespondToDateUseCase:
        """Provide respond to date use case."""
        return RespondToDateUseCase(coffee_date_service=coffee_date_service)

    @provide
    def get_confirm_date_use_case(
        self, settlement_service: SettlementService
    ) -> ConfirmDateUseCase:
        """Provide confirm date use case."""
        return ConfirmDateUseCase(settlement_service=settlement_service)

    @provide
    def get_cancel_date_use_case(
        self, coffee_date_service: CoffeeDateService
    ) -> CancelDateUseCase:
        """Provide cancel date use case."""
        return CancelDateUseCase(coffee_date_service=coffee_date_service)

    @provide
    def get_get_date_use_case(
        self, coffee_date_service: CoffeeDateService
    ) -> GetDateUseCase:
        """Provide get date use case."""
        return GetDateUseCase(coffee_date_service=coffee_date_service)

    @provide
    def get_list_dates_use_case(
        self, coffee_date_service: CoffeeDateService
    ) -> ListDatesUseCase:
        """Provide list dates use case."""
        return ListDatesUseCase(coffee_date_service=coffee_date_service)

    @provide
    def get_pay_for_date_use_case(
        self, settlement_service: SettlementService
    ) -> PayForDateUseCase:
        """Provide legacy pay for date use case."""
        return PayForDateUseCase(settlement_service=settlement_service)

    # Wallet use cases
    @provide
    def get_get_wallet_use_case(
        self,
        wallet_service: WalletService,
        user_service: UserService,
        wallet_settings: WalletSettings,
    ) -> GetWalletUseCase:
        """Provide get wallet use case."""
        return GetWalletUseCase(
            wallet_service=wallet_service,
            user_service=user_service,
            wallet_settings=wallet_settings,
        )

    @provide
    def get_top_up_use_case(self, wallet_service: WalletService) -> TopUpUseCase:
        """Provide top-up use case."""
        return TopUpUseCase(wallet_service=wallet_service)

    @provide
    def get_reconcile_wallet_use_case(
        self, wallet_service: WalletService
    ) -> ReconcileWalletUseCase:
        """Provide reconcile wallet use case."""
        return ReconcileWalletUseCase(wallet_service=wallet_service)

    # User use cases
    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide
    def get_assign_role_use_case(
        self, user_service: UserService
    ) -> AssignRoleUseCase:
        """Provide assign role use case."""
        return AssignRoleUseCase(user_service=user_service)
