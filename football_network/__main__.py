"""Run the API with uvicorn: ``python -m football_network``."""

import os

import uvicorn

from football_network.app import create_app


def main() -> None:
    uvicorn.run(
        create_app(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )


if __name__ == "__main__":
    main()
