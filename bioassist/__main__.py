import uvicorn

from bioassist.infra.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "bioassist.infra.rest_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )


if __name__ == "__main__":
    main()
