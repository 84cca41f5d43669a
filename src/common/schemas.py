from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Base schema: field snake_case trong Python, JSON dùng camelCase như frontend"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
