import uvicorn

# Set up logging first
from wishlist.config.logging_config import setup_logging
setup_logging()

from wishlist.core.config import settings
from wishlist.main import create_app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload and settings.is_development,
        reload_dirs=["."]
    )
