"""SQLAlchemy table definitions for Brew.

They match the schema defined in Alembic migrations. Invariants that must
hold under concurrency are enforced here as constraints, not only in code.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (Only the fields the matchmaking core reads and writes)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "role", Enum("host", "guest", name="user_role", create_type=False), nullable=True
    ),
    Column("display_name", String(100), nullable=True),
    Column("wallet_balance", Integer, nullable=False, server_default="0"),  # Cents
    Column("host_rate", Integer, nullable=True),  # Cents
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("wallet_balance >= 0", name="ck_users_wallet_balance_non_negative"),
    CheckConstraint("host_rate IS NULL OR host_rate >= 0", name="ck_users_host_rate"),
)

# ============================================================================
# SWIPES TABLE (Insert-only)
# ============================================================================
swipes_table = Table(
    "swipes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "swiper_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "swiped_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "direction",
        Enum("like", "pass", name="swipe_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("swiper_id", "swiped_id", name="uq_swipes_swiper_swiped"),
    CheckConstraint("swiper_id <> swiped_id", name="ck_swipes_not_self"),
)

Index("idx_swipes_swiped_id", swipes_table.c.swiped_id)

# ============================================================================
# MATCHES TABLE (One row per canonical pair, user1_id < user2_id)
# ============================================================================
matches_table = Table(
    "matches",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user1_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user2_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "status",
        Enum("active", "blocked", name="match_status", create_type=False),
        nullable=False,
        server_default="active",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user1_id", "user2_id", name="uq_matches_pair"),
    CheckConstraint("user1_id < user2_id", name="ck_matches_canonical_pair"),
)

Index("idx_matches_user2_id", matches_table.c.user2_id)

# ============================================================================
# COFFEE DATES TABLE
# ============================================================================
coffee_dates_table = Table(
    "coffee_dates",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "match_id", UUID, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False
    ),
    Column("host_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("guest_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("proposed_by", UUID, ForeignKey("users.id"), nullable=False),
    Column("scheduled_date", TIMESTAMP(timezone=True), nullable=False),
    Column("cafe_name", String(200), nullable=True),
    Column("cafe_address", String(500), nullable=True),
    Column("cafe_latitude", Float, nullable=True),
    Column("cafe_longitude", Float, nullable=True),
    Column("notes", Text, nullable=True),
    Column(
        "status",
        Enum(
            "proposed",
            "accepted",
            "declined",
            "confirmed",
            "cancelled",
            "completed",
            name="coffee_date_status",
            create_type=False,
        ),
        nullable=False,
        server_default="proposed",
    ),
    Column("guest_confirmed", Boolean, nullable=False, server_default="false"),
    Column("host_confirmed", Boolean, nullable=False, server_default="false"),
    Column(
        "payment_status",
        Enum("pending", "paid", "refunded", name="payment_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("payment_amount", Integer, nullable=True),  # Cents, set on settlement
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("host_id <> guest_id", name="ck_coffee_dates_distinct_parties"),
    CheckConstraint(
        "payment_status <> 'paid' OR (status = 'confirmed' "
        "AND guest_confirmed AND host_confirmed AND payment_amount IS NOT NULL)",
        name="ck_coffee_dates_paid_is_confirmed",
    ),
)

Index("idx_coffee_dates_match_id", coffee_dates_table.c.match_id)
Index("idx_coffee_dates_host_id", coffee_dates_table.c.host_id)
Index("idx_coffee_dates_guest_id", coffee_dates_table.c.guest_id)

# ============================================================================
# WALLET TRANSACTIONS TABLE (Append-only ledger)
# ============================================================================
wallet_transactions_table = Table(
    "wallet_transactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("amount", Integer, nullable=False),  # Cents, always positive
    Column(
        "type",
        Enum("credit", "debit", name="transaction_type", create_type=False),
        nullable=False,
    ),
    Column(
        "source",
        Enum(
            "stripe",
            "date_fee",
            "refund",
            "adjustment",
            name="transaction_source",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("description", Text, nullable=True),
    Column("related_date_id", UUID, ForeignKey("coffee_dates.id"), nullable=True),
    Column("stripe_session_id", String(255), nullable=True, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("amount > 0", name="ck_wallet_transactions_amount_positive"),
)

Index("idx_wallet_transactions_user_id", wallet_transactions_table.c.user_id)
Index(
    "idx_wallet_transactions_related_date_id",
    wallet_transactions_table.c.related_date_id,
)
