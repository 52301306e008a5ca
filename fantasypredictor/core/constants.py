"""Global constants for the fantasypredictor application."""

from decimal import Decimal

# Firestore collections
USERS_COLLECTION = "users"
LEDGER_COLLECTION = "ledger"
TOURNAMENTS_COLLECTION = "tournaments"

# Game rules
MATCHES_PER_GAME = 10
BASE_POINTS = Decimal("3")
CAPTAIN_MULTIPLIER = Decimal("3")
VICE_CAPTAIN_MULTIPLIER = Decimal("2")

# Prize pool split, host included
PRIZE_SPLIT = (
    ("first", Decimal("0.40")),
    ("second", Decimal("0.30")),
    ("third", Decimal("0.20")),
    ("host", Decimal("0.10")),
)

# Wallet
DEFAULT_SIGNUP_BONUS = 10000
LEDGER_HISTORY_LIMIT = 20

# Tournament creation defaults
DEFAULT_ENTRY_FEE = 100
DEFAULT_MAX_PARTICIPANTS = 100

# Email-related constants
SMTP_AUTH_ERROR_CODE = 534
