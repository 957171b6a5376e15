from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, Field, constr

# Largest value a PostgreSQL INTEGER primary key can hold.
MAX_ID = 2_147_483_647


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


def required_text(max_length: Optional[int] = None):
    return constr(strip_whitespace=True, min_length=1, max_length=max_length)


def optional_text(max_length: Optional[int] = None):
    return Annotated[Optional[constr(strip_whitespace=True, max_length=max_length)], BeforeValidator(blank_to_none)]


# NIK values are at most 16 characters; an empty string means "not provided".
NIK = required_text(16)
OptionalNIK = optional_text(16)
Name = required_text(100)
Phone = required_text(20)
OptionalPhone = optional_text(20)
RequiredText = required_text()
OptionalText = optional_text()
EntityRef = Annotated[int, Field(gt=0, le=MAX_ID)]


class MessageOut(BaseModel):
    message: str


class CreatedOut(MessageOut):
    id: int
