"""Run the Story Service API with ``python -m story_service``."""

from story_service.api.main import run

if __name__ == "__main__":
    run()
