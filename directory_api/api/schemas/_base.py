# directory_api/api/schemas/_base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # camelCase JSON (fullName, avatarUrl, ...); snake_case accepted too
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatchModel(CamelModel):
    """Request body where omitted fields mean "leave untouched"; explicit null is rejected."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def supplied(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}
