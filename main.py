"""Pantry Lens - Main Entry Point.

Provides FastAPI application factory and CLI commands for:
- Running the API server with uvicorn
- Extracting ingredients from caption text
- Captioning a local image and extracting its ingredients
"""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI

from src.config import config
from src.api.routes import router
from src.pipeline.ingredient_filter import extract
from src.services.image_captioner import CaptioningError
from src.services.ingredient_extractor import get_extraction_service

# Configure logging to stdout and a log file
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(config.LOG_FILE),
    ],
)

# Suppress noisy watchfiles logger (triggers on every log write causing spam)
logging.getLogger("watchfiles").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Pantry Lens",
        description="API for extracting ingredients from food images and captions",
        version="0.1.0",
    )

    # Include API router
    app.include_router(router)

    # Add root route
    @app.get("/")
    async def index():
        return {
            "name": "Pantry Lens",
            "version": "0.1.0",
            "description": "API for extracting ingredients from food images and captions",
            "docs": "/docs",
            "endpoints": {
                "health": "/api/v1/health",
                "extract_text": "POST /api/v1/ingredients/extract",
                "extract_image": "POST /api/v1/images/extract-ingredients",
                "vocabulary": "GET /api/v1/ingredients/vocabulary",
                "dietary_preferences": "GET /api/v1/dietary-preferences",
            },
        }

    return app


def extract_text(text: str) -> None:
    """Print the ingredients found in caption text, one per line."""
    ingredients = extract(text)
    if not ingredients:
        print("No ingredients found.")
        sys.exit(1)
    for name in ingredients:
        print(name)


def extract_image(path: Path) -> None:
    """Caption a local image and print the ingredients found."""
    missing = config.validate()
    if missing:
        print(f"Error: Missing configuration: {', '.join(missing)}")
        sys.exit(1)

    try:
        content = path.read_bytes()
    except OSError as e:
        print(f"Error reading image: {e}")
        sys.exit(1)

    try:
        result = get_extraction_service().extract_from_image(content)
    except CaptioningError as e:
        print(f"Error captioning image: {e}")
        sys.exit(1)

    print(f"Caption: {result['caption']}")
    if not result["ingredients"]:
        print("No ingredients found in the image.")
        sys.exit(1)
    for name in result["ingredients"]:
        print(f"  - {name}")


def run_server() -> None:
    """Run the FastAPI server with uvicorn."""
    # Validate config
    missing = config.validate()
    if missing:
        print(f"Warning: Missing configuration: {', '.join(missing)}")
        print("Image captioning will not work until it is set.")

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=config.APP_HOST,
        port=config.APP_PORT,
        reload=config.APP_DEBUG,
    )


def main() -> None:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Pantry Lens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                 # Run the API server
  python main.py --extract "2 cups rice, beans"  # Extract from caption text
  python main.py --image dinner.jpg              # Caption an image and extract
  python main.py --host 0.0.0.0                  # Run server on specific host
  python main.py --port 8080                     # Run server on specific port
        """,
    )

    parser.add_argument(
        "--extract",
        type=str,
        default=None,
        metavar="TEXT",
        help="Extract ingredients from caption text and exit",
    )
    parser.add_argument(
        "--image",
        type=Path,
        default=None,
        metavar="PATH",
        help="Caption a local image and extract its ingredients (needs HF_API_KEY)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help=f"Host to bind the server (default: {config.APP_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to bind the server (default: {config.APP_PORT})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload mode",
    )

    args = parser.parse_args()

    if args.extract is not None:
        extract_text(args.extract)
    elif args.image is not None:
        extract_image(args.image)
    else:
        # Override config with CLI args
        if args.host:
            config.APP_HOST = args.host
        if args.port:
            config.APP_PORT = args.port
        if args.reload:
            config.APP_DEBUG = True

        run_server()


if __name__ == "__main__":
    main()
