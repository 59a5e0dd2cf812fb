from crop_adviser_backend.models import LogMessage
from crop_adviser_backend.serializers import LogMessageSerializer


def write_log_message(level: str, message: str, related_resource_id=None, created_at=None):
    log_message = LogMessage(
        logLevel=level,
        message=message,
        relatedResourceId=str(related_resource_id) if related_resource_id else None,
    )
    if created_at is not None:
        log_message.createdAt = created_at

    log_message.save()


def get_log_messages_by_amount(amount: int, level: str = None) -> LogMessageSerializer:
    messages = LogMessage.objects.all()
    if level is not None:
        messages = messages.filter(logLevel=level.upper())
    return LogMessageSerializer(messages.order_by('-createdAt')[:amount], many=True)
