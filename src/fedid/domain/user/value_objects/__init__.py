from fedid.domain.user.value_objects.access_token import AccessToken
from fedid.domain.user.value_objects.activity_id import ActivityId
from fedid.domain.user.value_objects.display_name import DisplayName
from fedid.domain.user.value_objects.email import Email

__all__ = [
    "AccessToken",
    "ActivityId",
    "DisplayName",
    "Email",
]
