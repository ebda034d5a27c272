"""Commands - Write operations that change state.

Commands are immutable dataclasses with imperative names (SellProperty,
CreateOwner). Each command has exactly one handler.
"""

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshAccessToken,
    RegisterUser,
    RevokeRefreshToken,
)
from src.application.commands.owner_commands import CreateOwner, UpdateOwnerPhoto
from src.application.commands.property_commands import (
    AddPropertyImages,
    CreateProperty,
    DeletePropertyImage,
    InlineOwner,
    SellProperty,
    UpdateProperty,
)

__all__ = [
    # Auth commands
    "LoginUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RevokeRefreshToken",
    # Owner commands
    "CreateOwner",
    "UpdateOwnerPhoto",
    # Property commands
    "AddPropertyImages",
    "CreateProperty",
    "DeletePropertyImage",
    "InlineOwner",
    "SellProperty",
    "UpdateProperty",
]
