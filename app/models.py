# app/models.py
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from typing import Optional, Dict, Any, Union

from .errors import ValidationError


class Product(BaseModel):
    """A product record.

    Core fields are typed and never coerced; anything else the caller sends
    is kept as an extra field and serialized back unchanged.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    id: str
    name: str
    price: Union[int, float]
    description: Optional[str] = None
    category: Optional[str] = None
    inStock: Optional[bool] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "Product":
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ValidationError(f"Invalid product field '{field}': {first['msg']}") from e

    def to_dict(self) -> Dict[str, Any]:
        # only the fields the caller actually supplied
        return self.model_dump(exclude_unset=True)
