"""Base model class for hyperserial records."""

from pydantic import BaseModel, ConfigDict


class HyperBaseModel(BaseModel):
    """Base model for hyperserial records.

    Assignment is validated so a record can only ever hold values of the
    declared types. Arbitrary types are allowed because descriptors are plain
    Python objects, validated by ``isinstance`` and stored by reference.
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_enum_values=True,
        validate_assignment=True
    )
