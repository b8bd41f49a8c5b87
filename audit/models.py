from django.db import models


class AuditLog(models.Model):
    action = models.CharField(max_length=255)
    timestamp = models.DateTimeField(auto_now_add=True)
    object_repr = models.TextField()
    project_id = models.IntegerField(null=True, blank=True)
    change_description = models.TextField(blank=True)

    def __str__(self):
        return f'{self.action} at {self.timestamp}'

    class Meta:
        ordering = ['-timestamp']
