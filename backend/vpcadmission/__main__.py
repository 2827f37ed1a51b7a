"""Server entry point — `python -m vpcadmission` or the `ibmvpccluster-webhook` script.

Invariants:
    - Host, port and log level come from Settings (environment), never hardcoded here
    - Logging is configured by the app lifespan, not by uvicorn's log config
"""

import uvicorn

from vpcadmission.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "vpcadmission.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
