from contextlib import asynccontextmanager

from fastapi import FastAPI

from docseal.core import DocumentEngine, FieldSelector, load_or_generate
from docseal.middleware import BodySizeLimit
from docseal.routers import get_routers
from docseal.shared import Logger, load_config

logger = Logger(__name__).get_logger()

config = load_config()


@asynccontextmanager
async def lifespan(app: FastAPI):
    keys = load_or_generate(
        config.keys.public_path, config.keys.private_path, config.keys.bits
    )
    logger.info("Keys loaded / generated")

    app.state.engine = DocumentEngine(
        keys,
        FieldSelector(config.encryption.fields_to_encrypt),
        policy=config.encryption.policy,
    )
    yield


# ================================================================================
#       FastAPI Setup
# ================================================================================
app = FastAPI(title=config.general.title, lifespan=lifespan)

for router in get_routers():
    app.include_router(router)

app.add_middleware(BodySizeLimit)


# ================================================================================
#       Command Line
# ================================================================================
def welcome():
    # Log server banner
    for line in config.general.title.split("\n"):
        logger.info(line)

    logger.info("Starting document encryption server")
    logger.info(
        "Encryption policy: %s, fields: %s",
        config.encryption.policy,
        config.encryption.fields_to_encrypt,
    )


def main(argv=None):
    welcome()

    import uvicorn

    uvicorn.run(
        "docseal.main:app",
        host=config.network.host,
        port=config.network.port,
        reload=config.network.reload,
    )


if __name__ == "__main__":
    main()
