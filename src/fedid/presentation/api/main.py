"""Process entry point.

``uvicorn fedid.presentation.api.main:app`` or the ``fedid-api`` script.
"""

import uvicorn

from fedid.presentation.api.app import create_app
from fedid_config.settings import get_settings

# Application instance for uvicorn
app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "fedid.presentation.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
