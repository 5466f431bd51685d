# directory_api/infrastructure/database/models/__init__.py
# import every model so its table is registered on the metadata

from directory_api.infrastructure.database.models.role_model import RoleModel
from directory_api.infrastructure.database.models.user_model import UserModel

__all__ = ["RoleModel", "UserModel"]
