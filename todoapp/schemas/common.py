from datetime import datetime
from typing import Annotated
from pydantic import AfterValidator, BaseModel
from todoapp.utils.timezone import as_utc

# Datetimes read back from the database, always rendered as aware UTC
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

class Message(BaseModel):
    message: str
