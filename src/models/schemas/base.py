import pydantic

from src.utilities.formatters.field_formatter import format_dict_key_to_camel_case


class BaseSchemaModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        populate_by_name=True,
        alias_generator=format_dict_key_to_camel_case,
    )


class ContentSchemaModel(BaseSchemaModel):
    """Authored content: immutable once loaded, unknown keys rejected."""

    model_config = BaseSchemaModel.model_config.copy()
    model_config["frozen"] = True
    model_config["extra"] = "forbid"
