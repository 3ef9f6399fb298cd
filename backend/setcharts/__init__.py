import os

import sentry_sdk

if "SENTRY_DSN" in os.environ:
    sentry_sdk.init(
        os.environ["SENTRY_DSN"],
        environment=os.getenv("SETCHARTS_ENV", "localhost"),
        traces_sample_rate=1.0,
    )
