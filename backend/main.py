import uvicorn
from materials_service.core.config import settings


def main():
    """Start the materials API server."""
    uvicorn.run("materials_service.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
