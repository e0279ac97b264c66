"""Token detection patterns — GitHub, GitLab, Stripe, Slack, Twilio, SendGrid, etc."""

from repohygiene.patterns.models import SecretPattern

GITHUB_TOKEN = SecretPattern(
    name="GitHub Token",
    pattern=r"ghp_[A-Za-z0-9_]{36,}",
    severity="high",
    description="GitHub personal access token",
)

GITHUB_OAUTH_TOKEN = SecretPattern(
    name="GitHub OAuth Token",
    pattern=r"gho_[A-Za-z0-9_]{36,}",
    severity="high",
    description="GitHub OAuth token",
)

GITHUB_APP_TOKEN = SecretPattern(
    name="GitHub App Token",
    pattern=r"gh[usr]_[A-Za-z0-9_]{36,}",
    severity="high",
    description="GitHub App user-to-server, server-to-server or refresh token",
)

GITLAB_TOKEN = SecretPattern(
    name="GitLab Token",
    pattern=r"glpat-[A-Za-z0-9_-]{20,}",
    severity="high",
    description="GitLab personal access token",
)

NPM_TOKEN = SecretPattern(
    name="NPM Token",
    pattern=r"npm_[A-Za-z0-9]{36}",
    severity="high",
    description="NPM access token",
)

STRIPE_API_KEY = SecretPattern(
    name="Stripe API Key",
    pattern=r"sk_live_[0-9a-zA-Z]{24,}",
    severity="high",
    description="Stripe secret API key",
)

STRIPE_PUBLISHABLE_KEY = SecretPattern(
    name="Stripe Publishable Key",
    pattern=r"pk_live_[0-9a-zA-Z]{24,}",
    severity="medium",
    description="Stripe publishable key",
)

STRIPE_TEST_KEY = SecretPattern(
    name="Stripe Test Key",
    pattern=r"sk_test_[0-9a-zA-Z]{24,}",
    severity="low",
    description="Stripe test-mode secret key",
)

SLACK_TOKEN = SecretPattern(
    name="Slack Token",
    pattern=r"xox[baprs]-[0-9a-zA-Z-]{10,}",
    severity="high",
    description="Slack API token",
)

SLACK_WEBHOOK = SecretPattern(
    name="Slack Webhook",
    pattern=r"https://hooks\.slack\.com/services/T[A-Z0-9]{8,}/B[A-Z0-9]{8,}/[a-zA-Z0-9]{24,}",
    severity="high",
    description="Slack webhook URL",
)

TWILIO_API_KEY = SecretPattern(
    name="Twilio API Key",
    pattern=r"SK[0-9a-fA-F]{32}",
    severity="high",
    description="Twilio API key",
)

SENDGRID_API_KEY = SecretPattern(
    name="SendGrid API Key",
    pattern=r"SG\.[a-zA-Z0-9_-]{22}\.[a-zA-Z0-9_-]{43}",
    severity="high",
    description="SendGrid API key",
)

MAILCHIMP_API_KEY = SecretPattern(
    name="Mailchimp API Key",
    pattern=r"[a-f0-9]{32}-us[0-9]{1,2}",
    severity="high",
    description="Mailchimp API key",
)

DISCORD_TOKEN = SecretPattern(
    name="Discord Token",
    pattern=r"[MN][A-Za-z0-9]{23,}\.[A-Za-z0-9_-]{6}\.[A-Za-z0-9_-]{27}",
    severity="high",
    description="Discord bot token",
)

DISCORD_WEBHOOK = SecretPattern(
    name="Discord Webhook",
    pattern=r"https://discord\.com/api/webhooks/[0-9]+/[A-Za-z0-9_-]+",
    severity="high",
    description="Discord webhook URL",
)

ALL_TOKEN_PATTERNS = [
    GITHUB_TOKEN,
    GITHUB_OAUTH_TOKEN,
    GITHUB_APP_TOKEN,
    GITLAB_TOKEN,
    NPM_TOKEN,
    STRIPE_API_KEY,
    STRIPE_PUBLISHABLE_KEY,
    STRIPE_TEST_KEY,
    SLACK_TOKEN,
    SLACK_WEBHOOK,
    TWILIO_API_KEY,
    SENDGRID_API_KEY,
    MAILCHIMP_API_KEY,
    DISCORD_TOKEN,
    DISCORD_WEBHOOK,
]
