import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "taskboard.main:app",
        host=settings.HOST,
        port=settings.BACKEND_PORT,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
