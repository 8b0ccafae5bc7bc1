"""PKSUID service - Entry Point."""

from pksuid.config import load_config
from pksuid.ui.app import create_app

config = load_config()
app = create_app(config)


def main():
    import uvicorn
    uvicorn.run("pksuid.server:app", host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
