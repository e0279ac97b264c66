"""Connection strings, auth tokens and generic key/secret assignments."""

from repohygiene.patterns.models import SecretPattern

MONGODB_URI = SecretPattern(
    name="MongoDB Connection String",
    pattern=r"mongodb(?:\+srv)?://[^\s'\"]+",
    severity="high",
    description="MongoDB connection string with credentials",
)

POSTGRES_URI = SecretPattern(
    name="PostgreSQL Connection String",
    pattern=r"postgres(?:ql)?://[^\s'\"]+",
    severity="high",
    description="PostgreSQL connection string",
)

MYSQL_URI = SecretPattern(
    name="MySQL Connection String",
    pattern=r"mysql://[^\s'\"]+",
    severity="high",
    description="MySQL connection string",
)

JWT_TOKEN = SecretPattern(
    name="JWT Token",
    pattern=r"eyJ[A-Za-z0-9_-]*\.eyJ[A-Za-z0-9_-]*\.[A-Za-z0-9_-]*",
    severity="medium",
    description="JSON Web Token",
)

BEARER_TOKEN = SecretPattern(
    name="Bearer Token",
    pattern=r"Bearer\s+[A-Za-z0-9_-]{20,}",
    severity="high",
    description="Bearer authentication token",
)

GENERIC_API_KEY = SecretPattern(
    name="Generic API Key",
    pattern=r"(?i)(?:api[_-]?key|apikey)\s*[:=]\s*['\"]?([a-zA-Z0-9_-]{20,})['\"]?",
    severity="medium",
    description="Generic API key pattern",
)

GENERIC_SECRET = SecretPattern(
    name="Generic Secret",
    pattern=r"(?i)(?:secret|password|passwd|pwd)\s*[:=]\s*['\"]?([^\s'\"]{8,})['\"]?",
    severity="medium",
    description="Generic secret/password pattern",
)

ALL_CREDENTIAL_PATTERNS = [
    MONGODB_URI,
    POSTGRES_URI,
    MYSQL_URI,
    JWT_TOKEN,
    BEARER_TOKEN,
    GENERIC_API_KEY,
    GENERIC_SECRET,
]
