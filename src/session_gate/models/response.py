"""
Outbound error envelope.
"""

from pydantic import BaseModel

BAD_REQUEST_STATUS_CODE = 400
BAD_REQUEST_STATUS = "bad_request"


class ResponseMessage(BaseModel):
    status_code: int = BAD_REQUEST_STATUS_CODE
    status: str = BAD_REQUEST_STATUS
    message: str
