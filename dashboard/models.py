from django.db import models


class DailyNote(models.Model):
    date = models.CharField(max_length=10, unique=True)
    content = models.TextField(blank=True, default="")
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.date
