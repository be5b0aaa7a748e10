from pydantic import BaseModel, ConfigDict


class SerdeBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
