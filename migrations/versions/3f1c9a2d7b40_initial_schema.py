"""initial_schema

Create the matchmaking core schema for Brew:
- Users (role, wallet balance, host rate)
- Swipes (one per ordered pair, insert-only)
- Matches (one per canonical pair)
- Coffee dates (proposal, dual confirmation, payment)
- Wallet transactions (append-only ledger)

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-17 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUM_TYPES = {
    "user_role": ("host", "guest"),
    "swipe_direction": ("like", "pass"),
    "match_status": ("active", "blocked"),
    "coffee_date_status": (
        "proposed",
        "accepted",
        "declined",
        "confirmed",
        "cancelled",
        "completed",
    ),
    "payment_status": ("pending", "paid", "refunded"),
    "transaction_type": ("credit", "debit"),
    "transaction_source": ("stripe", "date_fee", "refund", "adjustment"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{v}'" for v in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("role", _enum("user_role"), nullable=True),
        sa.Column("display_name", sa.String(100), nullable=True),
        sa.Column("wallet_balance", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("host_rate", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "wallet_balance >= 0", name="ck_users_wallet_balance_non_negative"
        ),
        sa.CheckConstraint(
            "host_rate IS NULL OR host_rate >= 0", name="ck_users_host_rate"
        ),
    )

    # ========================================================================
    # SWIPES table
    # ========================================================================
    op.create_table(
        "swipes",
        _id(),
        sa.Column("swiper_id", sa.UUID(), nullable=False),
        sa.Column("swiped_id", sa.UUID(), nullable=False),
        sa.Column("direction", _enum("swipe_direction"), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["swiper_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["swiped_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("swiper_id", "swiped_id", name="uq_swipes_swiper_swiped"),
        sa.CheckConstraint("swiper_id <> swiped_id", name="ck_swipes_not_self"),
    )
    op.create_index("idx_swipes_swiped_id", "swipes", ["swiped_id"])

    # ========================================================================
    # MATCHES table (canonical pair: user1_id < user2_id)
    # ========================================================================
    op.create_table(
        "matches",
        _id(),
        sa.Column("user1_id", sa.UUID(), nullable=False),
        sa.Column("user2_id", sa.UUID(), nullable=False),
        sa.Column(
            "status",
            _enum("match_status"),
            nullable=False,
            server_default="active",
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user1_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user2_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user1_id", "user2_id", name="uq_matches_pair"),
        sa.CheckConstraint("user1_id < user2_id", name="ck_matches_canonical_pair"),
    )
    op.create_index("idx_matches_user2_id", "matches", ["user2_id"])

    # ========================================================================
    # COFFEE_DATES table
    # ========================================================================
    op.create_table(
        "coffee_dates",
        _id(),
        sa.Column("match_id", sa.UUID(), nullable=False),
        sa.Column("host_id", sa.UUID(), nullable=False),
        sa.Column("guest_id", sa.UUID(), nullable=False),
        sa.Column("proposed_by", sa.UUID(), nullable=False),
        sa.Column("scheduled_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("cafe_name", sa.String(200), nullable=True),
        sa.Column("cafe_address", sa.String(500), nullable=True),
        sa.Column("cafe_latitude", sa.Float(), nullable=True),
        sa.Column("cafe_longitude", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("coffee_date_status"),
            nullable=False,
            server_default="proposed",
        ),
        sa.Column(
            "guest_confirmed", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column(
            "host_confirmed", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column(
            "payment_status",
            _enum("payment_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("payment_amount", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["match_id"], ["matches.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["host_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["guest_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["proposed_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "host_id <> guest_id", name="ck_coffee_dates_distinct_parties"
        ),
        sa.CheckConstraint(
            "payment_status <> 'paid' OR (status = 'confirmed' "
            "AND guest_confirmed AND host_confirmed AND payment_amount IS NOT NULL)",
            name="ck_coffee_dates_paid_is_confirmed",
        ),
    )
    op.create_index("idx_coffee_dates_match_id", "coffee_dates", ["match_id"])
    op.create_index("idx_coffee_dates_host_id", "coffee_dates", ["host_id"])
    op.create_index("idx_coffee_dates_guest_id", "coffee_dates", ["guest_id"])

    # ========================================================================
    # WALLET_TRANSACTIONS table (append-only)
    # ========================================================================
    op.create_table(
        "wallet_transactions",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("type", _enum("transaction_type"), nullable=False),
        sa.Column("source", _enum("transaction_source"), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("related_date_id", sa.UUID(), nullable=True),
        sa.Column("stripe_session_id", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["related_date_id"], ["coffee_dates.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "stripe_session_id", name="uq_wallet_transactions_stripe_session_id"
        ),
        sa.CheckConstraint("amount > 0", name="ck_wallet_transactions_amount_positive"),
    )
    op.create_index(
        "idx_wallet_transactions_user_id", "wallet_transactions", ["user_id"]
    )
    op.create_index(
        "idx_wallet_transactions_related_date_id",
        "wallet_transactions",
        ["related_date_id"],
    )

    # Ledger rows are never edited or deleted
    op.execute("""
        CREATE OR REPLACE FUNCTION reject_wallet_transaction_change()
        RETURNS TRIGGER AS $$
        BEGIN
            RAISE EXCEPTION 'wallet_transactions is append-only';
        END;
        $$ LANGUAGE plpgsql;
    """)
    op.execute("""
        CREATE TRIGGER wallet_transactions_append_only
        BEFORE UPDATE OR DELETE ON wallet_transactions
        FOR EACH ROW EXECUTE FUNCTION reject_wallet_transaction_change();
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        "DROP TRIGGER IF EXISTS wallet_transactions_append_only ON wallet_transactions"
    )
    op.execute("DROP FUNCTION IF EXISTS reject_wallet_transaction_change()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("wallet_transactions")
    op.drop_table("coffee_dates")
    op.drop_table("matches")
    op.drop_table("swipes")
    op.drop_table("users")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
