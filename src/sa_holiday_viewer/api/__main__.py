"""
sa_holiday_viewer.api.__main__

`python -m sa_holiday_viewer.api` / the `sa-holiday-viewer` console script.
"""

from __future__ import annotations

import uvicorn

from sa_holiday_viewer.api.app import create_app
from sa_holiday_viewer.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        # configure_logging already installed the handlers and the id-masking filter.
        log_config=None,
    )


if __name__ == "__main__":
    main()
