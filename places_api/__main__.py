import uvicorn

from places_api import config


def main():
    uvicorn.run("places_api.main:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)


if __name__ == "__main__":
    main()
