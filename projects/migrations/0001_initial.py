from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('pid', models.IntegerField(help_text='Business project identifier, set once at creation', unique=True)),
                ('project_name', models.TextField()),
                ('ministry_dept', models.TextField()),
                ('lead_programme_manager', models.TextField()),
                ('programme_manager', models.TextField()),
                ('type', models.CharField(choices=[('NEW', 'New'), ('ONGOING', 'Ongoing'), ('ON_HOLD', 'On Hold'), ('COMPLETED', 'Completed')], max_length=20)),
                ('fund_available', models.CharField(choices=[('YES', 'Yes'), ('NO', 'No'), ('FUNDED', 'Funded')], max_length=10)),
                ('contract_value', models.TextField(help_text="Free-form currency amount, e.g. '$1,200,000'")),
                ('description', models.TextField()),
                ('status', models.TextField(help_text='Narrative progress update')),
                ('start_date', models.DateField(blank=True, null=True)),
                ('completion_date', models.DateField(blank=True, null=True)),
                ('is_draft', models.BooleanField(default=False, help_text='Drafts are left out of dashboard figures')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['-updated_at', 'id'],
                'indexes': [
                    models.Index(fields=['is_draft', 'updated_at'], name='projects_pr_is_draf_5c1f0e_idx'),
                    models.Index(fields=['type'], name='projects_pr_type_9a4d2b_idx'),
                    models.Index(fields=['fund_available'], name='projects_pr_fund_av_3e7b61_idx'),
                    models.Index(fields=['start_date'], name='projects_pr_start_d_d2c8a4_idx'),
                ],
            },
        ),
    ]
