"""Cloud provider credentials — AWS, Google Cloud, Azure, Firebase, Heroku."""

from repohygiene.patterns.models import SecretPattern

# Characters that may continue a base64 blob; used as look-around bounds so a
# fixed-length key never matches inside a longer blob.
_B64 = r"A-Za-z0-9/+="

AWS_ACCESS_KEY_ID = SecretPattern(
    name="AWS Access Key ID",
    pattern=r"AKIA[0-9A-Z]{16}",
    severity="high",
    description="Amazon Web Services access key",
)

AWS_SECRET_ACCESS_KEY = SecretPattern(
    name="AWS Secret Access Key",
    pattern=rf"(?<![{_B64}])[{_B64}]{{40}}(?![{_B64}])",
    severity="high",
    description="Potential AWS secret key (40 char base64)",
)

GOOGLE_CLOUD_API_KEY = SecretPattern(
    name="Google Cloud API Key",
    pattern=r"AIza[0-9A-Za-z_-]{35}",
    severity="high",
    description="Google Cloud Platform API key",
)

AZURE_STORAGE_KEY = SecretPattern(
    name="Azure Storage Key",
    pattern=rf"(?<![{_B64}])[{_B64}]{{86}}==(?![{_B64}])",
    severity="high",
    description="Azure Storage account key",
)

FIREBASE_API_KEY = SecretPattern(
    name="Firebase API Key",
    pattern=r"AIza[0-9A-Za-z_-]{35}",
    severity="medium",
    description="Firebase API key",
)

HEROKU_API_KEY = SecretPattern(
    name="Heroku API Key",
    pattern=r"[hH]eroku.*[0-9A-F]{8}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{4}-[0-9A-F]{12}",
    severity="high",
    description="Heroku API key",
)

ALL_CLOUD_PATTERNS = [
    AWS_ACCESS_KEY_ID,
    AWS_SECRET_ACCESS_KEY,
    GOOGLE_CLOUD_API_KEY,
    AZURE_STORAGE_KEY,
    FIREBASE_API_KEY,
    HEROKU_API_KEY,
]
