from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meme_relay.routers import get_routers
from meme_relay.shared import Logger, load_config

logger = Logger(__name__).get_logger()

config = load_config()


# ================================================================================
#       FastAPI Setup
# ================================================================================
app = FastAPI(title="meme-relay")
app.state.config = config

for router in get_routers():
    app.include_router(router)

origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def message_exception_handler(request: Request, exc: HTTPException):
    # Clients get {"message": ...} rather than FastAPI's {"detail": ...}
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


# ================================================================================
#       Command Line
# ================================================================================
def welcome():
    for line in config.general.title.split("\n"):
        logger.info(line)

    logger.info("Starting meme relay on port %s", config.network.port)


def main():
    welcome()

    import uvicorn

    uvicorn.run(
        "meme_relay.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
