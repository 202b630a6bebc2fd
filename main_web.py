import uvicorn

from core.config import get_settings
from core.log import configure_logging

if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "web.api:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.reload,
    )
