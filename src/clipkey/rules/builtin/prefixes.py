"""Vendor key prefixes — AWS, Stripe, Slack, GitHub, Google, GitLab."""

from clipkey.rules.models import KeyPrefix

# --- AWS ---
AWS_ACCESS_KEY = KeyPrefix(id="AWS_ACCESS_KEY", name="AWS Access Key ID", prefix="AKIA", min_length=20)
AWS_TEMP_ACCESS_KEY = KeyPrefix(
    id="AWS_TEMP_ACCESS_KEY", name="AWS Temporary Access Key ID", prefix="ASIA", min_length=20
)

# --- Stripe ---
STRIPE_SECRET_LIVE = KeyPrefix(id="STRIPE_SECRET_LIVE", name="Stripe Secret Key", prefix="sk_live_", min_length=32)
STRIPE_SECRET_TEST = KeyPrefix(
    id="STRIPE_SECRET_TEST", name="Stripe Test Secret Key", prefix="sk_test_", min_length=32
)
STRIPE_PUBLISHABLE_LIVE = KeyPrefix(
    id="STRIPE_PUBLISHABLE_LIVE", name="Stripe Publishable Key", prefix="pk_live_", min_length=32
)
STRIPE_PUBLISHABLE_TEST = KeyPrefix(
    id="STRIPE_PUBLISHABLE_TEST", name="Stripe Test Publishable Key", prefix="pk_test_", min_length=32
)
STRIPE_RESTRICTED_LIVE = KeyPrefix(id="STRIPE_RESTRICTED_LIVE", name="Stripe Restricted Key", prefix="rk_live_")
STRIPE_RESTRICTED_TEST = KeyPrefix(
    id="STRIPE_RESTRICTED_TEST", name="Stripe Test Restricted Key", prefix="rk_test_"
)

# --- Slack ---
SLACK_BOT_TOKEN = KeyPrefix(id="SLACK_BOT_TOKEN", name="Slack Bot Token", prefix="xoxb-", min_length=50)
SLACK_USER_TOKEN = KeyPrefix(id="SLACK_USER_TOKEN", name="Slack User Token", prefix="xoxp-", min_length=50)
SLACK_APP_TOKEN = KeyPrefix(id="SLACK_APP_TOKEN", name="Slack App Token", prefix="xoxa-")
SLACK_REFRESH_TOKEN = KeyPrefix(id="SLACK_REFRESH_TOKEN", name="Slack Refresh Token", prefix="xoxr-")

# --- GitHub ---
GITHUB_PAT = KeyPrefix(id="GITHUB_PAT", name="GitHub Personal Access Token", prefix="ghp_", min_length=40)
GITHUB_OAUTH = KeyPrefix(id="GITHUB_OAUTH", name="GitHub OAuth Token", prefix="gho_", min_length=40)
GITHUB_USER_TO_SERVER = KeyPrefix(
    id="GITHUB_USER_TO_SERVER", name="GitHub User-to-Server Token", prefix="ghu_", min_length=40
)
GITHUB_SERVER_TO_SERVER = KeyPrefix(
    id="GITHUB_SERVER_TO_SERVER", name="GitHub Server-to-Server Token", prefix="ghs_", min_length=40
)
GITHUB_REFRESH = KeyPrefix(id="GITHUB_REFRESH", name="GitHub Refresh Token", prefix="ghr_")
GITHUB_FINE_GRAINED_PAT = KeyPrefix(
    id="GITHUB_FINE_GRAINED_PAT", name="GitHub Fine-Grained Token", prefix="github_pat_", min_length=82
)

# --- Google ---
GOOGLE_API_KEY = KeyPrefix(id="GOOGLE_API_KEY", name="Google API Key", prefix="AIza", min_length=39)
GOOGLE_OAUTH_ACCESS = KeyPrefix(id="GOOGLE_OAUTH_ACCESS", name="Google OAuth Access Token", prefix="ya29.")

# --- GitLab ---
GITLAB_PAT = KeyPrefix(id="GITLAB_PAT", name="GitLab Personal Access Token", prefix="glpat-")
GITLAB_OAUTH_APP = KeyPrefix(id="GITLAB_OAUTH_APP", name="GitLab OAuth Application Secret", prefix="gloas-")
GITLAB_SERVICE_ACCOUNT = KeyPrefix(
    id="GITLAB_SERVICE_ACCOUNT", name="GitLab Service Account Token", prefix="glsa-"
)

ALL_PREFIXES = [
    AWS_ACCESS_KEY,
    AWS_TEMP_ACCESS_KEY,
    STRIPE_SECRET_LIVE,
    STRIPE_SECRET_TEST,
    STRIPE_PUBLISHABLE_LIVE,
    STRIPE_PUBLISHABLE_TEST,
    STRIPE_RESTRICTED_LIVE,
    STRIPE_RESTRICTED_TEST,
    SLACK_BOT_TOKEN,
    SLACK_USER_TOKEN,
    SLACK_APP_TOKEN,
    SLACK_REFRESH_TOKEN,
    GITHUB_PAT,
    GITHUB_OAUTH,
    GITHUB_USER_TO_SERVER,
    GITHUB_SERVER_TO_SERVER,
    GITHUB_REFRESH,
    GITHUB_FINE_GRAINED_PAT,
    GOOGLE_API_KEY,
    GOOGLE_OAUTH_ACCESS,
    GITLAB_PAT,
    GITLAB_OAUTH_APP,
    GITLAB_SERVICE_ACCOUNT,
]
