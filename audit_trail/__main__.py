import uvicorn

from audit_trail.config import settings


def main() -> None:
    uvicorn.run("audit_trail.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
