import uvicorn

from contract_analyzer.api.app import create_app
from contract_analyzer.config.settings import Settings
from contract_analyzer.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(f"Starting {settings.service_name} on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
