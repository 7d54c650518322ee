from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CalendarEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('date', models.DateField()),
                ('time', models.CharField(blank=True, default='', max_length=5)),
                ('location', models.CharField(blank=True, default='', max_length=200)),
                ('priority', models.CharField(choices=[('NORMAL', 'Обычное'), ('IMPORTANT', 'Важное'), ('URGENT', 'Срочное')], default='NORMAL', max_length=10)),
                ('description', models.TextField(blank=True, default='')),
                ('completed', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='calendar_events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['date', 'time', 'id'],
                'indexes': [models.Index(fields=['user', 'date'], name='calendar_event_user_date_idx')],
            },
        ),
    ]
