"""Backend entrypoint: starts uvicorn with the port from settings (PORT env)."""
import uvicorn

from tradefolio.config.settings import get_settings
from tradefolio.main import app


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host="127.0.0.1", port=settings.port)


if __name__ == "__main__":
    main()
