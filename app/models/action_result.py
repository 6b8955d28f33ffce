from pydantic import BaseModel
from typing import Any, Dict, Optional

class ActionResult(BaseModel):
    """Uniform envelope returned by every server action and shown by the dashboard."""

    success   : bool
    message   : str
    data      : Optional[Dict[str, Any]] = None
    timestamp : str

    def to_dict ( self ):

        return self.model_dump(exclude_none=True)
