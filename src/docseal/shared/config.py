from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike
from pathlib import Path
from tomllib import load
from typing import Literal

from pydantic import BaseModel, field_validator

DEFAULT_CONFIG_PATH = Path("config.toml")


class General(BaseModel):
    title: str = "docseal"


class Keys(BaseModel):
    public_path: str = "pub_key"
    private_path: str = "priv_key"
    bits: int = 2048


class Encryption(BaseModel):
    policy: Literal["selective", "depth_1"] = "selective"
    fields_to_encrypt: list[str] = []


class Logging(BaseModel):
    level: int = INFO

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(value.upper(), INFO)


class Paths(BaseModel):
    logs: str = "logs"


class Network(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False
    max_body_size: int = 4096  # bytes


class Config(BaseModel):
    general: General = General()
    keys: Keys = Keys()
    encryption: Encryption = Encryption()
    paths: Paths = Paths()
    logging: Logging = Logging()
    network: Network = Network()


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files.

    A missing shared config file yields the defaults.
    """
    config_data = {}
    shared_path = Path(shared_config_file)
    if shared_path.exists():
        with shared_path.open("rb") as f:
            config_data = load(f)

    # Specific config replaces whole sections of the shared one
    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            config_data.update(specific_data)

    return Config(**config_data)
