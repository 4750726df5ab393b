import uvicorn

from tango.app import create_app
from tango.config import settings

app = create_app()


def run():
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
