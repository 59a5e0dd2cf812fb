import uuid
from django.db import models
from django.utils import timezone


class LogMessage(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    createdAt = models.DateTimeField(default=timezone.now)
    relatedResourceId = models.CharField(max_length=64, blank=True, null=True)
    logLevel = models.CharField(max_length=24)
    message = models.TextField()

    class Meta:
        ordering = ['-createdAt']

    def __str__(self):
        if self.relatedResourceId:
            return f"{self.relatedResourceId} --- {self.createdAt} {self.logLevel}: {self.message}"
        return f"{self.createdAt} {self.logLevel}: {self.message}"
