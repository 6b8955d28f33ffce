from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class User(BaseModel):

    model_config = ConfigDict(populate_by_name=True)

    id         : int
    name       : str
    email      : str
    created_at : str = Field(alias='createdAt')

    def to_dict ( self ):

        return self.model_dump(by_alias=True)

class ServerInfo(BaseModel):

    model_config = ConfigDict(populate_by_name=True)

    timestamp       : str
    environment     : Optional[str] = None
    server_location : Optional[str] = Field(default=None, alias='serverLocation')
    processing_time : Optional[str] = Field(default=None, alias='processingTime')

    def to_dict ( self ):

        return self.model_dump(by_alias=True, exclude_none=True)
