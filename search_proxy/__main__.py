from __future__ import annotations

import uvicorn

from search_proxy.core.config import settings


def main() -> None:
    uvicorn.run(
        "search_proxy.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
