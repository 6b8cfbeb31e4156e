from django.db import models


class TelegramSubscriber(models.Model):
    chat_id = models.BigIntegerField(unique=True)
    name = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name or str(self.chat_id)
