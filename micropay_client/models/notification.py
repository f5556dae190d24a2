"""Notification model."""

from dataclasses import dataclass
from datetime import datetime

from micropay_client.models.enums import (
    NotificationChannel,
    NotificationStatus,
    NotificationType,
)
from micropay_client.serialization import (
    parse_datetime,
    parse_enum,
    parse_optional_str,
    require,
)


@dataclass(frozen=True)
class Notification:
    """Informational message about payments, transactions or the account."""

    id: str
    user_id: str
    notification_type: NotificationType
    channel: NotificationChannel
    status: NotificationStatus
    title: str
    message: str
    reference_id: str | None = None
    reference_type: str | None = None
    created_at: datetime | None = None
    sent_at: datetime | None = None
    failed_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Notification":
        return cls(
            id=str(require(data, "id", "Notification")),
            user_id=str(require(data, "userId", "Notification")),
            notification_type=parse_enum(
                NotificationType, require(data, "notificationType", "Notification")
            ),
            channel=parse_enum(NotificationChannel, require(data, "channel", "Notification")),
            status=parse_enum(NotificationStatus, require(data, "status", "Notification")),
            title=str(data.get("title") or ""),
            message=str(data.get("message") or ""),
            reference_id=parse_optional_str(data.get("referenceId")),
            reference_type=parse_optional_str(data.get("referenceType")),
            created_at=parse_datetime(data.get("createdAt")),
            sent_at=parse_datetime(data.get("sentAt")),
            failed_at=parse_datetime(data.get("failedAt")),
        )
