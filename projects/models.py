from django.db import models


class Project(models.Model):
    NEW = 'NEW'
    ONGOING = 'ONGOING'
    ON_HOLD = 'ON_HOLD'
    COMPLETED = 'COMPLETED'
    TYPE_CHOICES = [
        (NEW, 'New'),
        (ONGOING, 'Ongoing'),
        (ON_HOLD, 'On Hold'),
        (COMPLETED, 'Completed'),
    ]

    FUND_YES = 'YES'
    FUND_NO = 'NO'
    FUND_FUNDED = 'FUNDED'
    FUND_CHOICES = [
        (FUND_YES, 'Yes'),
        (FUND_NO, 'No'),
        (FUND_FUNDED, 'Funded'),
    ]

    pid = models.IntegerField(unique=True, help_text="Business project identifier, set once at creation")
    project_name = models.TextField()
    ministry_dept = models.TextField()
    lead_programme_manager = models.TextField()
    programme_manager = models.TextField()
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    fund_available = models.CharField(max_length=10, choices=FUND_CHOICES)
    contract_value = models.TextField(help_text="Free-form currency amount, e.g. '$1,200,000'")
    description = models.TextField()
    status = models.TextField(help_text="Narrative progress update")
    start_date = models.DateField(null=True, blank=True)
    completion_date = models.DateField(null=True, blank=True)
    is_draft = models.BooleanField(default=False, help_text="Drafts are left out of dashboard figures")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at', 'id']
        indexes = [
            models.Index(fields=['is_draft', 'updated_at'], name='projects_pr_is_draf_5c1f0e_idx'),
            models.Index(fields=['type'], name='projects_pr_type_9a4d2b_idx'),
            models.Index(fields=['fund_available'], name='projects_pr_fund_av_3e7b61_idx'),
            models.Index(fields=['start_date'], name='projects_pr_start_d_d2c8a4_idx'),
        ]

    def __str__(self):
        return f"{self.pid} - {self.project_name}"
