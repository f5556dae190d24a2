"""Notification gateway."""

from micropay_client.exceptions import ClientValidationError, DecodeError
from micropay_client.gateways.base import BaseGateway, require_text
from micropay_client.models.notification import Notification

DEFAULT_PAGE_SIZE = 20


class NotificationGateway(BaseGateway):
    """Page through a user's notifications."""

    def list(self, user_id: str, page: int = 0, size: int = DEFAULT_PAGE_SIZE) -> list[Notification]:
        require_text(user_id, "userId", "User ID")
        if page < 0:
            raise ClientValidationError("Page must be 0 or greater", field="page")
        if size <= 0:
            raise ClientValidationError("Page size must be greater than 0", field="size")

        data = self.transport.get(
            f"/api/notifications/{self._segment(user_id)}",
            params={"page": page, "size": size},
        )
        if data is None:
            return []
        if not isinstance(data, list):
            raise DecodeError("Expected a list of notifications")
        return [Notification.from_dict(item) for item in data]
