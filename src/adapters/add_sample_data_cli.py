"""CLI adapter seeding the sample portfolio for an existing user.

Credentials come from the ``TRACKER_EMAIL`` and ``TRACKER_PASSWORD``
environment variables (a ``.env`` file is honoured).
"""

import os

import dotenv

from src.infrastructure.container import build_services
from src.infrastructure.logging.logger import get_app_logger

EMAIL_ENV_VAR = "TRACKER_EMAIL"
PASSWORD_ENV_VAR = "TRACKER_PASSWORD"


def main() -> None:
    """Sign in and insert the sample assets and debts."""
    dotenv.load_dotenv()
    logger = get_app_logger()
    email = os.getenv(EMAIL_ENV_VAR)
    password = os.getenv(PASSWORD_ENV_VAR)
    if not email or not password:
        raise RuntimeError(
            f"Set {EMAIL_ENV_VAR} and {PASSWORD_ENV_VAR} to seed sample data."
        )

    services = build_services()
    services.auth.sign_in(email, password)
    try:
        result = services.sample_data().execute()
    finally:
        services.auth.sign_out()

    logger.info(f"Seeded sample data for {email}")
    print(
        f"Added {result.asset_count} sample assets and "
        f"{result.debt_count} sample debts."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
